"""Utility modules for configuration, logging, images and the Gemini client."""

from .errors import ConfigurationError, GenerationError, ImageValidationError, ReplyAssistantError

__all__ = [
    'ConfigurationError',
    'GenerationError',
    'ImageValidationError',
    'ReplyAssistantError',
]
