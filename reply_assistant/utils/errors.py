"""Error handling utilities for the complaint reply assistant."""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from enum import Enum


GENERATION_FAILED_MESSAGE = "Failed to get a response from the AI model."
MISSING_API_KEY_MESSAGE = (
    "API Key tidak terkonfigurasi. Aplikasi tidak dapat terhubung ke layanan AI."
)


class ErrorType(Enum):
    """Enumeration of error types in the reply assistant."""

    # Generation Errors
    GENERATION_FAILED = "GENERATION_FAILED"

    # Image Attachment Errors
    IMAGE_UNSUPPORTED_TYPE = "IMAGE_UNSUPPORTED_TYPE"
    IMAGE_UNREADABLE = "IMAGE_UNREADABLE"
    IMAGE_TOO_LARGE = "IMAGE_TOO_LARGE"

    # Configuration Errors
    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_INVALID = "CONFIG_INVALID"


@dataclass
class ErrorContext:
    """
    Context information for errors raised by the reply assistant.

    Attributes:
        error_type: Type of error from ErrorType enum
        message: Technical error message, safe for logs
        recoverable: Whether the user can retry after this error
        user_message: Optional localized message shown in the form
        details: Optional additional error details
    """

    error_type: ErrorType
    message: str
    recoverable: bool
    user_message: Optional[str] = None
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error context to dictionary for logging/serialization.

        Returns:
            Dictionary representation of error context
        """
        return {
            "error_type": self.error_type.value,
            "message": self.message,
            "recoverable": self.recoverable,
            "user_message": self.user_message,
            "details": self.details or {},
        }


class ReplyAssistantError(Exception):
    """
    Base exception for all reply assistant errors.

    Attributes:
        context: ErrorContext with detailed error information
    """

    def __init__(self, context: ErrorContext):
        self.context = context
        super().__init__(context.message)

    def __str__(self) -> str:
        return f"{self.context.error_type.value}: {self.context.message}"

    @property
    def user_message(self) -> str:
        """Message suitable for display, falling back to the technical one."""
        return self.context.user_message or self.context.message

    def to_dict(self) -> Dict[str, Any]:
        return self.context.to_dict()


class ConfigurationError(ReplyAssistantError):
    """Exception for missing or malformed configuration."""

    @classmethod
    def missing_api_key(cls) -> "ConfigurationError":
        """
        Create error for an unset generation API key.

        Returns:
            ConfigurationError instance
        """
        context = ErrorContext(
            error_type=ErrorType.CONFIG_MISSING,
            message="API key is not defined in environment variables",
            recoverable=False,
            user_message=MISSING_API_KEY_MESSAGE,
            details={"variables": ["GEMINI_API_KEY", "API_KEY"]},
        )
        return cls(context)

    @classmethod
    def invalid_value(cls, key: str, value: Any) -> "ConfigurationError":
        """
        Create error for a configuration value that cannot be used.

        Args:
            key: Dotted configuration key
            value: Offending value

        Returns:
            ConfigurationError instance
        """
        context = ErrorContext(
            error_type=ErrorType.CONFIG_INVALID,
            message=f"Invalid configuration value for '{key}': {value!r}",
            recoverable=False,
            details={"key": key},
        )
        return cls(context)


class GenerationError(ReplyAssistantError):
    """Exception for failed calls to the generation model."""

    @classmethod
    def request_failed(cls, operation: str) -> "GenerationError":
        """
        Create the opaque error returned to callers after a failed call.

        The underlying exception is logged by the caller and is not
        attached to the context.

        Args:
            operation: Description of operation that failed

        Returns:
            GenerationError instance
        """
        context = ErrorContext(
            error_type=ErrorType.GENERATION_FAILED,
            message=GENERATION_FAILED_MESSAGE,
            recoverable=True,
            details={"operation": operation},
        )
        return cls(context)


class ImageValidationError(ReplyAssistantError):
    """Exception for rejected image attachments."""

    @classmethod
    def unsupported_type(cls, filename: str, content_type: str) -> "ImageValidationError":
        context = ErrorContext(
            error_type=ErrorType.IMAGE_UNSUPPORTED_TYPE,
            message=f"Rejected '{filename}': content type '{content_type}' is not an image",
            recoverable=True,
            user_message="Hanya file gambar (JPG, PNG, dll.) yang diperbolehkan.",
            details={"filename": filename, "content_type": content_type},
        )
        return cls(context)

    @classmethod
    def unreadable(cls, filename: str, error: Exception) -> "ImageValidationError":
        context = ErrorContext(
            error_type=ErrorType.IMAGE_UNREADABLE,
            message=f"Failed to read image '{filename}': {str(error)}",
            recoverable=True,
            user_message="Gambar tidak dapat dibaca. Silakan pilih file gambar lain.",
            details={"filename": filename},
        )
        return cls(context)

    @classmethod
    def too_large(cls, filename: str, size: int, limit_mb: int) -> "ImageValidationError":
        context = ErrorContext(
            error_type=ErrorType.IMAGE_TOO_LARGE,
            message=f"Image '{filename}' is {size} bytes, over the {limit_mb} MB limit",
            recoverable=True,
            user_message=f"Ukuran gambar melebihi batas {limit_mb} MB.",
            details={"filename": filename, "size": size, "limit_mb": limit_mb},
        )
        return cls(context)


def handle_generation_error(error: Exception, operation: str, logger) -> None:
    """
    Log a provider failure with full detail and raise the opaque error.

    Args:
        error: Original exception from the provider SDK
        operation: Description of operation that failed
        logger: Logger instance for error logging

    Raises:
        GenerationError: Generic error without the original detail
    """
    logger.error(
        f"Error generating content during {operation}: {error!r}",
        exc_info=error,
    )
    raise GenerationError.request_failed(operation) from None
