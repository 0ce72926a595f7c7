# prompt_store.py
"""Saved-prompt library kept in a single named storage slot.

The slot holds a JSON array of prompt records, newest first, capped at
``MAX_SAVED_PROMPTS``. Anything unreadable in the slot is logged and treated
as an empty library; failures while writing are raised as
``StorageWriteFailed``.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

import config
from prompt_engine import GeneratedPrompt

logger = logging.getLogger(__name__)

STORE_KEY = "ai-video-prompts"
MAX_SAVED_PROMPTS = 20


class PromptStoreError(Exception):
    """Base error for the prompt library."""


class StorageWriteFailed(PromptStoreError):
    """The library could not be written back to its backend."""


class MemoryBackend:
    """Slot storage in a dict. Used by tests and throwaway sessions."""

    def __init__(self, slots: Optional[Dict[str, str]] = None):
        self.slots: Dict[str, str] = dict(slots or {})

    def read(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def write(self, key: str, value: str) -> None:
        self.slots[key] = value


class FileBackend:
    """Slot storage in one JSON file mapping slot keys to payload strings."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as fh:
            slots = json.load(fh)
        if not isinstance(slots, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return slots

    def read(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def write(self, key: str, value: str) -> None:
        try:
            slots = self._load()
        except ValueError as exc:
            logger.warning("Overwriting unreadable store file %s: %s", self.path, exc)
            slots = {}
        slots[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(slots, fh, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


class PromptStore:
    def __init__(self, backend, key: str = STORE_KEY, limit: int = MAX_SAVED_PROMPTS):
        self.backend = backend
        self.key = key
        self.limit = limit

    def list(self) -> List[GeneratedPrompt]:
        """Return the saved prompts, newest first. Never raises on bad data."""
        try:
            payload = self.backend.read(self.key)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read prompt slot %r, treating it as empty: %s", self.key, exc)
            return []
        if payload is None:
            return []

        try:
            items = json.loads(payload)
            if not isinstance(items, list):
                raise ValueError(f"expected a JSON array, got {type(items).__name__}")
        except ValueError as exc:
            logger.warning("Discarding unparsable prompt slot %r: %s", self.key, exc)
            return []

        records = []
        for index, item in enumerate(items):
            try:
                records.append(GeneratedPrompt.from_dict(item))
            except (ValueError, KeyError, TypeError, AttributeError) as exc:
                record_id = item.get("id") if isinstance(item, dict) else None
                logger.warning(
                    "Skipping unreadable prompt record %s (index %d) in slot %r: %r",
                    record_id, index, self.key, exc,
                )
        return records

    def save(self, record: GeneratedPrompt) -> None:
        # A re-saved id replaces the older copy so ids stay unique in the slot.
        records = [r for r in self.list() if r.id != record.id]
        records.insert(0, record)
        self._write(records[: self.limit])
        logger.debug("Saved prompt %s (%s)", record.id, record.title)

    def delete_by_id(self, record_id: str) -> None:
        records = self.list()
        kept = [r for r in records if r.id != record_id]
        self._write(kept)
        logger.debug("Deleted %d prompt(s) with id %s", len(records) - len(kept), record_id)

    def _write(self, records: List[GeneratedPrompt]) -> None:
        try:
            payload = json.dumps([r.to_dict() for r in records], ensure_ascii=False)
            self.backend.write(self.key, payload)
        except (OSError, TypeError, ValueError) as exc:
            raise StorageWriteFailed(f"Could not write prompt slot {self.key!r}: {exc}") from exc


def open_store(path: Optional[Union[str, Path]] = None) -> PromptStore:
    """Open the file-backed library at ``path`` (default: ``PROMPT_STORE_PATH``)."""
    return PromptStore(FileBackend(path or config.store_path()))
