"""
Entry points shared by the Streamlit and FastAPI front ends.

Configuration and the Gemini client are created lazily on first use so that
importing the UI never requires an API key.
"""

from __future__ import annotations

import logging
from typing import Optional

from .form_state import ComplaintForm
from .models.complaint import GenerationRequest, InlineImage
from .utils.config import Config
from .utils.gemini_client import GeminiClient, GenerationClient
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

_config: Optional[Config] = None
_client: Optional[GeminiClient] = None


def get_config() -> Config:
    """Load configuration once and set up logging from it."""
    global _config
    if _config is None:
        _config = Config.load()
        setup_logging(
            level=_config.logging.level,
            log_format=_config.logging.format,
            log_file=_config.logging.file,
        )
        logger.info(f"Configuration loaded: model={_config.gemini.model_id}")
    return _config


def get_generation_client() -> GeminiClient:
    global _client
    if _client is None:
        gemini = get_config().gemini
        _client = GeminiClient(
            api_key=gemini.api_key,
            model_id=gemini.model_id,
            temperature=gemini.temperature,
            top_p=gemini.top_p,
            top_k=gemini.top_k,
        )
    return _client


def new_form(client: Optional[GenerationClient] = None) -> ComplaintForm:
    """Create a ComplaintForm wired to the configured client and UI settings."""
    ui = get_config().ui
    return ComplaintForm(
        client=client or get_generation_client(),
        max_image_mb=ui.max_image_mb,
        copy_feedback_seconds=ui.copy_feedback_seconds,
        scroll_delay_ms=ui.scroll_delay_ms,
    )


async def generate_complaint_response(
    complaint: str,
    core_answer: str,
    image: Optional[InlineImage] = None,
) -> str:
    """
    Generate a reply without going through the form.

    Args:
        complaint: Complaint text, may be empty
        core_answer: Internal resolution to expand
        image: Optional inline image part

    Returns:
        Reply text from the model

    Raises:
        ConfigurationError: If no API key is configured
        GenerationError: If the model call fails
    """
    request = GenerationRequest(complaint=complaint, core_answer=core_answer, image=image)
    return await get_generation_client().generate(request)


def reset_cache() -> None:
    """Forget the cached config and client (used when the environment changes)."""
    global _config, _client
    _config = None
    _client = None
