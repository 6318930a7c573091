"""Configuration management for the reply assistant."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .errors import ConfigurationError
from .logging import DEFAULT_FORMAT


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config.yaml"


@dataclass
class GeminiConfig:
    """Gemini generation configuration."""
    model_id: str
    temperature: float
    top_p: float
    top_k: int
    api_key: Optional[str] = None


@dataclass
class UIConfig:
    """Form behaviour configuration."""
    max_image_mb: int
    copy_feedback_seconds: float
    scroll_delay_ms: int


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str
    format: str
    file: Optional[str]


@dataclass
class Config:
    """Main configuration class."""
    gemini: GeminiConfig
    ui: UIConfig
    logging: LoggingConfig

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """
        Load configuration from file and environment variables.

        Environment variables override config file values:
        - GEMINI_API_KEY (falls back to API_KEY)
        - GEMINI_MODEL
        - MAX_IMAGE_MB
        - LOG_LEVEL

        A missing config file is not an error; built-in defaults apply.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Config instance with loaded settings

        Raises:
            ConfigurationError: If a value cannot be converted
        """
        load_dotenv()

        path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        config_data: Dict[str, Any] = {}
        if path.exists():
            with open(path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}

        gemini_data = config_data.get("gemini", {}) or {}
        ui_data = config_data.get("ui", {}) or {}
        logging_data = config_data.get("logging", {}) or {}

        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or None

        gemini_config = GeminiConfig(
            model_id=os.getenv("GEMINI_MODEL", gemini_data.get("model_id", "gemini-2.5-flash")),
            temperature=_coerce(float, "gemini.temperature", gemini_data.get("temperature", 0.5)),
            top_p=_coerce(float, "gemini.top_p", gemini_data.get("top_p", 0.9)),
            top_k=_coerce(int, "gemini.top_k", gemini_data.get("top_k", 40)),
            api_key=api_key.strip() if api_key else None,
        )

        ui_config = UIConfig(
            max_image_mb=_coerce(
                int, "ui.max_image_mb", os.getenv("MAX_IMAGE_MB", ui_data.get("max_image_mb", 10))
            ),
            copy_feedback_seconds=_coerce(
                float, "ui.copy_feedback_seconds", ui_data.get("copy_feedback_seconds", 2.0)
            ),
            scroll_delay_ms=_coerce(int, "ui.scroll_delay_ms", ui_data.get("scroll_delay_ms", 100)),
        )

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", logging_data.get("level", "INFO")),
            format=logging_data.get("format", DEFAULT_FORMAT),
            file=logging_data.get("file") or None,
        )

        return cls(gemini=gemini_config, ui=ui_config, logging=logging_config)


def _coerce(kind, key: str, value: Any):
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise ConfigurationError.invalid_value(key, value)
