"""Image attachment helpers: type checks, decoding checks and data URIs."""

import base64
import io
import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ..models.complaint import ImageAttachment
from .errors import ImageValidationError

logger = logging.getLogger(__name__)


def is_image_type(content_type: Optional[str]) -> bool:
    """Return True when the declared media type names an image format."""
    return bool(content_type) and content_type.lower().startswith("image/")


def encode_data_uri(data: bytes, content_type: str) -> str:
    b64 = base64.b64encode(data).decode("utf-8")
    return f"data:{content_type};base64,{b64}"


def load_attachment(
    filename: str,
    content_type: Optional[str],
    data: bytes,
    max_size_mb: int = 10,
) -> ImageAttachment:
    """
    Validate an uploaded file and convert it into an attachment.

    Args:
        filename: Name of the selected file
        content_type: Declared media type from the browser
        data: Raw file bytes
        max_size_mb: Upper bound on the file size

    Returns:
        ImageAttachment carrying the encoded data URI

    Raises:
        ImageValidationError: If the file is not an image, is too large,
            or cannot be decoded
    """
    if not is_image_type(content_type):
        raise ImageValidationError.unsupported_type(filename, content_type or "")

    if len(data) > max_size_mb * 1024 * 1024:
        raise ImageValidationError.too_large(filename, len(data), max_size_mb)

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as exc:
        raise ImageValidationError.unreadable(filename, exc)

    logger.debug(f"Encoded attachment '{filename}' ({content_type}, {len(data)} bytes)")
    return ImageAttachment(
        filename=filename,
        mime_type=content_type,
        content=data,
        data_uri=encode_data_uri(data, content_type),
    )
