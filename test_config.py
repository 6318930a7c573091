"""Tests for configuration loading and environment overrides."""

import pytest

from reply_assistant.utils import config as config_module
from reply_assistant.utils.config import Config
from reply_assistant.utils.errors import ConfigurationError


def test_load_repository_config():
    config = Config.load()

    assert config.gemini.model_id == "gemini-2.5-flash"
    assert config.gemini.temperature == 0.5
    assert config.gemini.top_p == 0.9
    assert config.gemini.top_k == 40
    assert config.gemini.api_key is None
    assert config.ui.copy_feedback_seconds == 2.0
    assert config.ui.scroll_delay_ms == 100
    assert config.logging.file is None


def test_missing_file_falls_back_to_defaults(tmp_path):
    config = Config.load(str(tmp_path / "absent.yaml"))

    assert config.gemini.model_id == "gemini-2.5-flash"
    assert config.gemini.top_k == 40
    assert config.ui.max_image_mb == 10


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("API_KEY", "fallback-key")
    monkeypatch.setenv("GEMINI_API_KEY", "primary-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
    monkeypatch.setenv("MAX_IMAGE_MB", "3")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = Config.load()

    assert config.gemini.api_key == "primary-key"
    assert config.gemini.model_id == "gemini-2.5-pro"
    assert config.ui.max_image_mb == 3
    assert config.logging.level == "DEBUG"


def test_api_key_fallback_variable(monkeypatch):
    monkeypatch.setenv("API_KEY", "fallback-key")

    assert Config.load().gemini.api_key == "fallback-key"


def test_invalid_value_raises_configuration_error(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("gemini:\n  top_k: many\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        Config.load(str(path))


def test_dotenv_is_read_only_through_load_dotenv(monkeypatch):
    def fake_load_dotenv(*args, **kwargs):
        monkeypatch.setenv("GEMINI_API_KEY", "from-dotenv")
        return True

    monkeypatch.setattr(config_module, "load_dotenv", fake_load_dotenv)

    assert Config.load().gemini.api_key == "from-dotenv"
