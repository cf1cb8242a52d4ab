# backend/tests/conftest.py
import pytest

from trigrams.core.config import Settings

SAMPLE_TEXT = """It was the best of times, it was the worst of times,
it was the age of wisdom, it was the age of foolishness,
it was the epoch of belief, it was the epoch of incredulity.
"""


@pytest.fixture
def make_settings():
    def _make(**overrides):
        return Settings(_env_file=None, **overrides)
    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def write_source(tmp_path):
    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
