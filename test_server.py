"""Tests for the FastAPI form endpoints."""

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from conftest import FakeGenerationClient
from reply_assistant.form_state import GENERIC_ERROR_MESSAGE
from reply_assistant.responder import get_generation_client
from reply_assistant.utils.errors import GenerationError
from server import MISSING_FIELDS_MESSAGE, app


@pytest.fixture
def fake():
    client = FakeGenerationClient(reply="Yth. Pelanggan, ... ~PR")
    app.dependency_overrides[get_generation_client] = lambda: client
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def http():
    return TestClient(app)


def test_index_renders_form(http):
    response = http.get("/")

    assert response.status_code == 200
    assert 'id="reply-form"' in response.text
    assert 'data-copy-feedback-ms="2000"' in response.text


def test_form_script_drops_replies_after_reset(http):
    script = http.get("/static/app.js").text

    assert "requestSeq += 1" in script
    assert "const seq = ++requestSeq" in script
    assert "if (seq !== requestSeq) return;" in script


def test_healthcheck(http):
    assert http.get("/healthz").json() == {"status": "ok"}


def test_generate_text_only(http, fake):
    response = http.post(
        "/api/generate",
        data={"complaint": "Pesanan belum sampai", "core_answer": "Kami akan kirim ulang barangnya hari ini juga."},
    )

    assert response.status_code == 200
    assert response.json() == {"response": "Yth. Pelanggan, ... ~PR"}
    assert fake.requests[0].complaint == "Pesanan belum sampai"
    assert fake.requests[0].image is None


def test_generate_rejects_empty_complaint_without_image(http, fake):
    response = http.post(
        "/api/generate",
        data={"complaint": "", "core_answer": "Kami akan kirim ulang barangnya hari ini juga."},
    )

    assert response.status_code == 400
    assert response.json() == {"error": MISSING_FIELDS_MESSAGE}
    assert fake.requests == []


def test_generate_empty_complaint_with_image(http, fake, png_bytes):
    response = http.post(
        "/api/generate",
        data={"complaint": "", "core_answer": "Kami akan kirim ulang barangnya hari ini juga."},
        files={"image": ("resi.png", png_bytes, "image/png")},
    )

    assert response.status_code == 200
    assert fake.requests[0].complaint == ""
    assert fake.requests[0].image.mime_type == "image/png"


def test_generate_with_image(http, fake, png_bytes):
    response = http.post(
        "/api/generate",
        data={"complaint": "Lihat foto", "core_answer": "Kami ganti."},
        files={"image": ("rusak.png", png_bytes, "image/png")},
    )

    assert response.status_code == 200
    assert fake.requests[0].image.mime_type == "image/png"


def test_generate_rejects_non_image(http, fake):
    response = http.post(
        "/api/generate",
        data={"complaint": "x", "core_answer": "Kami ganti."},
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Hanya file gambar (JPG, PNG, dll.) yang diperbolehkan."
    assert fake.requests == []


def test_generate_rejects_decompression_bomb(http, fake, png_bytes, monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 4)

    response = http.post(
        "/api/generate",
        data={"complaint": "x", "core_answer": "Kami ganti."},
        files={"image": ("bomb.png", png_bytes, "image/png")},
    )

    assert response.status_code == 400
    assert "tidak dapat dibaca" in response.json()["error"]
    assert fake.requests == []


def test_generate_requires_core_answer(http, fake):
    response = http.post("/api/generate", data={"complaint": "Barang rusak", "core_answer": "  "})

    assert response.status_code == 400
    assert response.json() == {"error": MISSING_FIELDS_MESSAGE}
    assert fake.requests == []


def test_generation_failure_returns_generic_message(http, fake):
    fake.error = GenerationError.request_failed("generate_content")

    response = http.post("/api/generate", data={"complaint": "x", "core_answer": "y"})

    assert response.status_code == 502
    assert response.json() == {"error": GENERIC_ERROR_MESSAGE}
