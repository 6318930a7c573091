"""Google Gemini client wrapper for generating customer-service replies."""

import base64
import logging
from typing import Any, List, Optional, Protocol

from google import genai
from google.genai import types

from ..models.complaint import GenerationRequest
from ..prompts import SYSTEM_INSTRUCTION, build_task_prompt
from .errors import ConfigurationError, handle_generation_error

logger = logging.getLogger(__name__)


class GenerationClient(Protocol):
    """Anything that turns a GenerationRequest into reply text."""

    async def generate(self, request: GenerationRequest) -> str:
        """Return the generated reply or raise GenerationError."""
        ...


class GeminiClient:
    """
    Single-shot wrapper around the Gemini ``generate_content`` API.

    Each call issues exactly one request with fixed sampling parameters and
    the store persona as the system instruction. There are no retries and
    no explicit timeout.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_id: str = "gemini-2.5-flash",
        temperature: float = 0.5,
        top_p: float = 0.9,
        top_k: int = 40,
        system_instruction: str = SYSTEM_INSTRUCTION,
        sdk_client: Optional[Any] = None,
    ):
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key; checked at call time, not here
            model_id: Generation model identifier
            temperature: Sampling temperature
            top_p: Nucleus sampling threshold
            top_k: Top-k truncation
            system_instruction: Persona directive sent with every call
            sdk_client: Pre-built ``genai.Client`` reused for every call (mainly for tests)
        """
        self.api_key = api_key
        self.model_id = model_id
        self.temperature = temperature
        self.top_p = top_p
        self.top_k = top_k
        self.system_instruction = system_instruction
        self._sdk_client = sdk_client

        logger.info(
            f"Initialized GeminiClient: model={model_id}, "
            f"api_key_configured={bool(api_key)}"
        )

    def _client(self) -> Any:
        if self._sdk_client is not None:
            return self._sdk_client
        # Fresh SDK client per call, closed by generate(); its async transport is
        # bound to the running loop
        return genai.Client(api_key=self.api_key)

    def build_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=self.system_instruction,
            temperature=self.temperature,
            top_p=self.top_p,
            top_k=self.top_k,
        )

    @staticmethod
    def build_parts(request: GenerationRequest) -> List[types.Part]:
        """
        Build the ordered content parts: image first, then the prompt text.

        Args:
            request: Submission from the form

        Returns:
            List of content parts for a single user turn
        """
        parts: List[types.Part] = []
        if request.image is not None:
            parts.append(
                types.Part(
                    inline_data=types.Blob(
                        data=base64.b64decode(request.image.data),
                        mime_type=request.image.mime_type,
                    )
                )
            )
        parts.append(types.Part(text=build_task_prompt(request.complaint, request.core_answer)))
        return parts

    async def generate(self, request: GenerationRequest) -> str:
        """
        Generate a formal reply for one complaint.

        Args:
            request: Complaint, core answer and optional image

        Returns:
            The model's text, unmodified

        Raises:
            ConfigurationError: If no API key is configured (no request is made)
            GenerationError: If the call or the response handling fails
        """
        if not self.api_key:
            logger.error("API key is not defined in environment variables")
            raise ConfigurationError.missing_api_key()

        try:
            contents = [types.Content(role="user", parts=self.build_parts(request))]
            logger.debug(
                f"Invoking {self.model_id}: image={'yes' if request.image else 'no'}, "
                f"complaint_chars={len(request.complaint)}"
            )

            sdk_client = self._client()
            try:
                response = await sdk_client.aio.models.generate_content(
                    model=self.model_id,
                    contents=contents,
                    config=self.build_config(),
                )
            finally:
                if sdk_client is not self._sdk_client:
                    await sdk_client.aio.aclose()

            text = response.text
            if text is None:
                raise ValueError("Model response contained no text")

            logger.info(f"Gemini generation successful: chars={len(text)}")
            return text

        except Exception as e:
            handle_generation_error(e, operation="generate_content", logger=logger)
