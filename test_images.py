"""Tests for attachment validation and data-URI encoding."""

import base64

import pytest
from PIL import Image

from conftest import make_image_bytes
from reply_assistant.utils.errors import ErrorType, ImageValidationError
from reply_assistant.utils.images import encode_data_uri, is_image_type, load_attachment


@pytest.mark.parametrize(
    "content_type, expected",
    [
        ("image/png", True),
        ("image/jpeg", True),
        ("IMAGE/WEBP", True),
        ("application/pdf", False),
        ("text/plain", False),
        ("", False),
        (None, False),
    ],
)
def test_is_image_type(content_type, expected):
    assert is_image_type(content_type) is expected


def test_encode_data_uri():
    assert encode_data_uri(b"abc", "image/gif") == "data:image/gif;base64,YWJj"


def test_load_attachment_splits_back_to_inline_image():
    data = make_image_bytes("JPEG")

    attachment = load_attachment("foto.jpg", "image/jpeg", data)
    inline = attachment.to_inline_image()

    assert attachment.size == len(data)
    assert attachment.data_uri == encode_data_uri(data, "image/jpeg")
    assert inline.mime_type == "image/jpeg"
    assert base64.b64decode(inline.data) == data


def test_load_attachment_rejects_declared_non_image():
    with pytest.raises(ImageValidationError) as exc_info:
        load_attachment("virus.exe", "application/octet-stream", b"MZ")

    assert exc_info.value.context.error_type is ErrorType.IMAGE_UNSUPPORTED_TYPE


def test_load_attachment_rejects_undecodable_bytes():
    with pytest.raises(ImageValidationError) as exc_info:
        load_attachment("empty.png", "image/png", b"")

    assert exc_info.value.context.error_type is ErrorType.IMAGE_UNREADABLE


def test_load_attachment_rejects_decompression_bomb(monkeypatch):
    data = make_image_bytes("PNG")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 4)

    with pytest.raises(ImageValidationError) as exc_info:
        load_attachment("bomb.png", "image/png", data)

    assert exc_info.value.context.error_type is ErrorType.IMAGE_UNREADABLE
