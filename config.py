import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

DEFAULT_STORE_PATH = os.path.join(".prompt_studio", "prompts.json")

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def store_path() -> str:
    """Location of the saved-prompt file, read fresh so reruns pick up changes."""
    return os.getenv("PROMPT_STORE_PATH", DEFAULT_STORE_PATH)


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO")


def setup_logging(level: str = "") -> None:
    logging.basicConfig(
        level=getattr(logging, (level or log_level()).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
