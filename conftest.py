"""Shared fixtures: fake generation clients and in-memory images."""

import io
from typing import List, Optional

import pytest
from PIL import Image

from reply_assistant import responder
from reply_assistant.models.complaint import GenerationRequest
from reply_assistant.utils import config as config_module


class FakeGenerationClient:
    """Records requests and returns a canned reply or raises."""

    def __init__(self, reply: str = "Terima kasih atas laporan Anda. ~ZR", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.requests: List[GenerationRequest] = []

    async def generate(self, request: GenerationRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.reply


def make_image_bytes(fmt: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), (200, 30, 30)).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def fake_client():
    return FakeGenerationClient()


@pytest.fixture
def png_bytes():
    return make_image_bytes("PNG")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep real keys and cached clients out of every test."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    monkeypatch.delenv("MAX_IMAGE_MB", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)
    responder.reset_cache()
    yield
    responder.reset_cache()
