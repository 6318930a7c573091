"""
UI-agnostic state for the complaint reply form.

Both front ends (Streamlit and the FastAPI HTML form) drive a ComplaintForm:
they forward field edits, attachments and button clicks here and render
whatever the form exposes afterwards.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .models.complaint import ComplaintInput, GenerationRequest, ImageAttachment
from .models.state import OperationState
from .utils.errors import ImageValidationError
from .utils.gemini_client import GenerationClient
from .utils.images import load_attachment

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = (
    "Maaf, terjadi kesalahan saat memproses permintaan Anda. Silakan coba lagi."
)
COPY_FEEDBACK_SECONDS = 2.0
SCROLL_DELAY_MS = 100


class ComplaintForm:
    """
    Form state plus the operations a user can perform on it.

    Attributes:
        complaint: Complaint text and optional attachment
        core_answer: Staff's internal answer
        result: Last generated reply ("" when none)
        error: Inline error message, or None
        state: Current OperationState
        uploader_token: Bumped whenever the file input must be reset
    """

    def __init__(
        self,
        client: GenerationClient,
        max_image_mb: int = 10,
        copy_feedback_seconds: float = COPY_FEEDBACK_SECONDS,
        scroll_delay_ms: int = SCROLL_DELAY_MS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.max_image_mb = max_image_mb
        self.copy_feedback_seconds = copy_feedback_seconds
        self.scroll_delay_ms = scroll_delay_ms
        self._clock = clock

        self.complaint = ComplaintInput()
        self.core_answer = ""
        self.result = ""
        self.error: Optional[str] = None
        self.state = OperationState.IDLE
        self.uploader_token = 0
        self.scroll_pending = False
        self._copied_until: Optional[float] = None
        self._request_seq = 0

    # ------------------------------------------------------------------ fields

    def update_complaint(self, text: str) -> None:
        self.complaint.text = text or ""

    def update_core_answer(self, text: str) -> None:
        self.core_answer = text or ""

    @property
    def attachment(self) -> Optional[ImageAttachment]:
        return self.complaint.attachment

    @property
    def is_loading(self) -> bool:
        return self.state is OperationState.LOADING

    @property
    def can_submit(self) -> bool:
        """Complaint text or image, a non-blank core answer, nothing in flight."""
        return (
            self.complaint.has_content
            and bool(self.core_answer.strip())
            and not self.is_loading
        )

    # ------------------------------------------------------------ attachments

    def attach_image(self, filename: str, content_type: Optional[str], data: bytes) -> bool:
        """
        Attach an image, replacing any previous one.

        A rejected file leaves the previous attachment, the result and the
        loading state untouched and sets the inline error.

        Returns:
            True if the image was attached
        """
        try:
            attachment = load_attachment(
                filename, content_type, data, max_size_mb=self.max_image_mb
            )
        except ImageValidationError as exc:
            logger.warning(f"Image attachment rejected: {exc.to_dict()}")
            self.error = exc.user_message
            return False

        self.error = None
        self.complaint.attachment = attachment
        logger.info(f"Attached image '{filename}' ({attachment.size} bytes)")
        return True

    def remove_image(self) -> None:
        """Drop the attachment and reset the file input so the same file can be picked again."""
        self.complaint.attachment = None
        self.uploader_token += 1

    # ---------------------------------------------------------------- submit

    def build_request(self) -> GenerationRequest:
        attachment = self.complaint.attachment
        return GenerationRequest(
            complaint=self.complaint.text,
            core_answer=self.core_answer,
            image=attachment.to_inline_image() if attachment else None,
        )

    async def submit(self) -> bool:
        """
        Send the current form to the generation client once.

        Returns:
            True when a reply was stored, False when the submission was
            blocked, failed, or superseded while in flight
        """
        if not self.can_submit:
            return False

        self._request_seq += 1
        seq = self._request_seq
        self.state = OperationState.LOADING
        self.error = None
        self.result = ""
        self.scroll_pending = False

        request = self.build_request()
        try:
            text = await self.client.generate(request)
        except Exception as exc:
            logger.error(f"Reply generation failed: {exc}", exc_info=True)
            if seq != self._request_seq:
                return False
            self.error = GENERIC_ERROR_MESSAGE
            self.state = OperationState.ERROR
            return False

        if seq != self._request_seq:
            logger.info("Discarding stale generation result")
            return False

        self.result = text
        self.scroll_pending = True
        self.state = OperationState.SUCCESS
        return True

    def consume_scroll_request(self) -> bool:
        """Return True once after each successful submission."""
        pending = self.scroll_pending
        self.scroll_pending = False
        return pending

    # ------------------------------------------------------------------ copy

    def copy_result(self, write: Callable[[str], None]) -> bool:
        """
        Put the current result on the clipboard through ``write``.

        Returns:
            True if the text was written
        """
        if not self.result:
            return False
        try:
            write(self.result)
        except Exception as exc:
            logger.warning(f"Clipboard write failed: {exc}")
            return False
        self._copied_until = self._clock() + self.copy_feedback_seconds
        return True

    @property
    def is_copied(self) -> bool:
        return self._copied_until is not None and self._clock() < self._copied_until

    # ----------------------------------------------------------------- reset

    def reset(self) -> None:
        """Return to the initial idle state; an in-flight reply is discarded."""
        self._request_seq += 1
        self.complaint = ComplaintInput()
        self.core_answer = ""
        self.result = ""
        self.error = None
        self.state = OperationState.IDLE
        self.uploader_token += 1
        self.scroll_pending = False
        self._copied_until = None
