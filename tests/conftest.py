import pytest

from sentence_grammar.config import settings


@pytest.fixture
def cat_sentence() -> str:
    return 'The cat sat on the mat.'


@pytest.fixture
def compound_complex_sentence() -> str:
    return 'Although it was raining, we went outside and played.'


@pytest.fixture
def max_sentence_length(monkeypatch):
    """Shrinks the HTTP sentence limit for the duration of a test."""
    monkeypatch.setattr(settings, 'max_sentence_length', 10)
    return settings.max_sentence_length
