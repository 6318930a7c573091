"""Data models for complaint replies."""

from .complaint import ComplaintInput, GenerationRequest, ImageAttachment, InlineImage
from .state import OperationState

__all__ = [
    "ComplaintInput",
    "GenerationRequest",
    "ImageAttachment",
    "InlineImage",
    "OperationState",
]
