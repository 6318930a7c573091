"""FastAPI front end for the complaint reply assistant."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Dict, Optional

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from reply_assistant.form_state import ComplaintForm
from reply_assistant.responder import get_config, get_generation_client, new_form
from reply_assistant.utils.gemini_client import GenerationClient
from reply_assistant.utils.logging import clear_context, set_context


APP_TITLE = "Asisten Layanan Pelanggan AI"
MISSING_FIELDS_MESSAGE = "Isi keluhan atau lampirkan foto, lalu masukkan inti jawaban."
BASE_DIR = Path(__file__).resolve().parent

app = FastAPI(title=APP_TITLE)

app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def get_form(client: GenerationClient = Depends(get_generation_client)) -> ComplaintForm:
    return new_form(client)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    ui = get_config().ui
    context = {
        "app_title": APP_TITLE,
        "max_image_mb": ui.max_image_mb,
        "copy_feedback_ms": int(ui.copy_feedback_seconds * 1000),
        "scroll_delay_ms": ui.scroll_delay_ms,
    }
    return templates.TemplateResponse(request, "index.html", context)


@app.post("/api/generate")
async def generate_reply(
    complaint: str = Form(""),
    core_answer: str = Form(""),
    image: Optional[UploadFile] = File(None),
    form: ComplaintForm = Depends(get_form),
) -> JSONResponse:
    set_context(request_id=uuid.uuid4().hex[:8])
    try:
        form.update_complaint(complaint)
        form.update_core_answer(core_answer)

        if image is not None and image.filename:
            data = await image.read()
            if not form.attach_image(image.filename, image.content_type, data):
                return JSONResponse({"error": form.error}, status_code=400)

        if not form.can_submit:
            return JSONResponse({"error": MISSING_FIELDS_MESSAGE}, status_code=400)

        if not await form.submit():
            return JSONResponse({"error": form.error}, status_code=502)

        return JSONResponse({"response": form.result})
    finally:
        clear_context()


@app.get("/healthz")
async def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}
