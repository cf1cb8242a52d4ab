# backend/tests/test_config.py
import pytest
from pydantic import ValidationError

from trigrams.core.config import Settings


def test_defaults(settings):
    assert settings.TOP_K == 100
    assert settings.mode == "combined"
    assert settings.INCLUDE_FINAL_TRIGRAM is False
    assert settings.ENCODING == "utf-8"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TRIGRAMS_TOP_K", "5")
    monkeypatch.setenv("TRIGRAMS_PROCESS_INDIVIDUALLY", "true")
    monkeypatch.setenv("TRIGRAMS_LOG_LEVEL", "info")

    current = Settings(_env_file=None)

    assert current.TOP_K == 5
    assert current.mode == "individual"
    assert current.LOG_LEVEL == "INFO"


def test_top_k_must_be_positive(make_settings):
    with pytest.raises(ValidationError):
        make_settings(TOP_K=0)


def test_settings_are_immutable(settings):
    with pytest.raises(ValidationError):
        settings.TOP_K = 3


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("TRIGRAMS_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
