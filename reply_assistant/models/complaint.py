"""Complaint input and generation request data models."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InlineImage:
    """
    Image payload embedded directly in a generation request.

    Attributes:
        data: Base64 body without the ``data:<type>;base64,`` prefix
        mime_type: Declared media type, e.g. ``image/png``
    """
    data: str
    mime_type: str


@dataclass
class ImageAttachment:
    """
    An image selected in the form.

    Attributes:
        filename: Name of the selected file
        mime_type: Declared media type of the file
        content: Raw file bytes
        data_uri: ``data:`` URI used for the preview and the request payload
    """
    filename: str
    mime_type: str
    content: bytes
    data_uri: str

    @property
    def size(self) -> int:
        return len(self.content)

    def to_inline_image(self) -> InlineImage:
        """Split the data URI into the media-type-free base64 body."""
        _, _, body = self.data_uri.partition(",")
        return InlineImage(data=body, mime_type=self.mime_type)


@dataclass
class ComplaintInput:
    """
    The customer's complaint as captured by the form.

    Attributes:
        text: Free-form complaint text, possibly empty
        attachment: Optional attached photo
    """
    text: str = ""
    attachment: Optional[ImageAttachment] = None

    @property
    def has_content(self) -> bool:
        return bool(self.text.strip()) or self.attachment is not None


@dataclass(frozen=True)
class GenerationRequest:
    """
    One submission to the completion client.

    Attributes:
        complaint: Complaint text (may be empty when an image is attached)
        core_answer: Internal resolution to expand into a full reply
        image: Optional inline image part
    """
    complaint: str
    core_answer: str
    image: Optional[InlineImage] = None
