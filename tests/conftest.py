import os

import pytest

from adaptive_core.schema import DifficultyLevel, Item
from adaptive_core.question_bank import InMemoryQuestionBank, build_synthetic_bank


@pytest.fixture(autouse=True)
def _clean_adaptive_env(monkeypatch):
    """Keep ADAPTIVE_* variables (including ones a .env file loads) out of other tests."""
    for key in list(os.environ):
        if key.startswith("ADAPTIVE_"):
            monkeypatch.delenv(key)
    yield
    for key in list(os.environ):
        if key.startswith("ADAPTIVE_"):
            os.environ.pop(key)


@pytest.fixture
def synthetic_bank() -> InMemoryQuestionBank:
    return build_synthetic_bank(per_level=4)


@pytest.fixture
def mixed_pool() -> list:
    # At θ = 0 the first three carry the most information
    return [
        Item(id="mid", difficulty_level=DifficultyLevel.INTERMEDIATE),
        Item(id="easy", difficulty_level=DifficultyLevel.FOUNDATION),
        Item(id="hard", difficulty_level=DifficultyLevel.HIGHER),
        Item(id="floor", difficulty_level=DifficultyLevel.BEGINNER),
        Item(id="ceiling", difficulty_level=DifficultyLevel.CHALLENGE),
    ]
