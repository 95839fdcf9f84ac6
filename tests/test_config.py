"""Tests Settings — lecture de l'environnement + cache."""
import pytest
from pydantic import ValidationError

from block_composer.config import Settings, get_settings, reset_settings


def test_defaults():
    s = get_settings()
    assert s.allow_scripts is False
    assert s.hidden_policy == "omit"
    assert s.default_scroll_offset == 80
    assert s.log_level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("BLOCK_COMPOSER_ALLOW_SCRIPTS", "Yes")
    monkeypatch.setenv("BLOCK_COMPOSER_HIDDEN_POLICY", "EMPTY")
    monkeypatch.setenv("BLOCK_COMPOSER_SCROLL_OFFSET", "64")
    monkeypatch.setenv("BLOCK_COMPOSER_LOG_LEVEL", "debug")
    s = Settings.from_env()
    assert s.allow_scripts is True
    assert s.hidden_policy == "empty"
    assert s.default_scroll_offset == 64
    assert s.log_level == "DEBUG"


def test_invalid_policy_rejected(monkeypatch):
    monkeypatch.setenv("BLOCK_COMPOSER_HIDDEN_POLICY", "sometimes")
    with pytest.raises(ValidationError):
        Settings.from_env()


def test_negative_offset_rejected():
    with pytest.raises(ValidationError):
        Settings(default_scroll_offset=-1)


def test_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("BLOCK_COMPOSER_ALLOW_SCRIPTS", "1")
    assert get_settings() is first
    reset_settings()
    assert get_settings().allow_scripts is True
