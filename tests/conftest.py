"""
Pytest Configuration and Fixtures

Shared fixtures for all tests.
"""

from datetime import datetime, timedelta, timezone

import pytest

from prompt_engine import FormData, GeneratedPrompt
from prompt_store import MemoryBackend, PromptStore, open_store


def first_pick(options):
    return options[0]


@pytest.fixture
def pick_first():
    """Deterministic picker: always the first camera move and light."""
    return first_pick


@pytest.fixture
def sample_form() -> FormData:
    return FormData(
        product_name="Nike Air Max 270",
        features=["Air Max heel unit", "Breathable mesh upper", "Comfortable cushioning"],
        visual_style="streetwear",
        music_mood="trap",
        slogan="Just Do It",
    )


@pytest.fixture
def memory_store() -> PromptStore:
    return PromptStore(MemoryBackend())


@pytest.fixture
def file_store(tmp_path) -> PromptStore:
    return open_store(tmp_path / "prompts.json")


@pytest.fixture
def make_record():
    """Factory for records with predictable ids and increasing timestamps."""
    start = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def _make(index: int, title: str = "") -> GeneratedPrompt:
        form = FormData(product_name=title or f"Product {index}", features=[f"feature {index}"])
        return GeneratedPrompt(
            id=f"id-{index}",
            title=form.product_name,
            prompt=f"prompt {index}",
            metadata=form,
            created_at=start + timedelta(minutes=index),
        )

    return _make
