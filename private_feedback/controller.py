from __future__ import annotations

from typing import Protocol

import httpx

from private_feedback.config import Settings, get_settings
from private_feedback.errors import GENERIC_SUBMIT_FAILURE, FeedbackError, FeedbackValidationError
from private_feedback.schemas.feedback import FeedbackPayload
from private_feedback.services.feedback_api import submit_feedback
from private_feedback.state import MAX_RATING, MIN_RATING, TEXT_FIELDS, FormState, SubmissionStatus
from private_feedback.utils.logging import logger
from private_feedback.validation import validate_form
from private_feedback.view import FormView, build_view


THANK_YOU_MESSAGE = "Thank you for your feedback! We will work on improving."
PLEASE_WAIT_NOTICE = "Please wait, your feedback is being submitted."


class Renderer(Protocol):
    def render(self, view: FormView) -> None: ...

    def acknowledge(self, text: str) -> None: ...

    def navigate(self, route: str) -> None: ...

    def notice(self, text: str) -> None: ...


class FeedbackFormController:
    """
    Owns the negative-feedback form for a single page visit.

    Renderer events map onto edit_field / set_rating / submit. At most one
    submission is in flight; the status flips to SUBMITTING before the first
    await so a second submit() observes it.
    """

    def __init__(
        self,
        renderer: Renderer | None = None,
        *,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.renderer = renderer
        self.settings = settings or get_settings()
        self.client = client
        self.state = FormState()

    @property
    def view(self) -> FormView:
        return build_view(self.state)

    def _render(self) -> None:
        if self.renderer is not None:
            self.renderer.render(self.view)

    def edit_field(self, field_name: str, value: str) -> None:
        if field_name not in TEXT_FIELDS:
            raise ValueError(f"Unknown form field: {field_name!r}")
        setattr(self.state, field_name, value)
        if self.state.error_message:
            self.state.error_message = None
        self._render()

    def set_rating(self, star: int) -> None:
        if self.state.is_submitting:
            return
        if isinstance(star, bool) or not MIN_RATING <= star <= MAX_RATING:
            raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {star!r}")
        self.state.rating = star
        self._render()

    def _note_blocked_attempt(self) -> None:
        self.state.blocked_attempts += 1
        logger.debug("Submit ignored while in flight (attempt %s)", self.state.blocked_attempts)
        if self.renderer is not None and self.state.blocked_attempts >= self.settings.wait_notice_threshold:
            self.renderer.notice(PLEASE_WAIT_NOTICE)

    def _fail(self, message: str) -> None:
        self.state.submission_status = SubmissionStatus.FAILED
        self.state.error_message = message

    async def submit(self) -> None:
        if self.state.is_submitting:
            self._note_blocked_attempt()
            return
        if self.state.submission_status is SubmissionStatus.SUCCEEDED:
            return

        try:
            validate_form(self.state)
        except FeedbackValidationError as exc:
            self.state.error_message = str(exc)
            self._render()
            return

        payload = FeedbackPayload.from_state(self.state)
        self.state.submission_status = SubmissionStatus.SUBMITTING
        self.state.error_message = None
        self.state.blocked_attempts = 0
        self._render()

        try:
            await submit_feedback(payload, settings=self.settings, client=self.client)
        except FeedbackError as exc:
            logger.warning("Feedback submission failed (%s): %s", type(exc).__name__, str(exc))
            self._fail(str(exc))
        except RuntimeError as exc:
            logger.error("Feedback service configuration error: %s", str(exc))
            self._fail(GENERIC_SUBMIT_FAILURE)
        except Exception as exc:
            logger.exception("Unexpected error submitting feedback: %s", str(exc))
            self._fail(GENERIC_SUBMIT_FAILURE)
        else:
            self.state.submission_status = SubmissionStatus.SUCCEEDED
            logger.info("Feedback submitted successfully")
        finally:
            # Cancellation skips the handlers above; never leave the form locked.
            if self.state.is_submitting:
                self.state.submission_status = SubmissionStatus.IDLE
            self.state.blocked_attempts = 0

        self._render()
        if self.state.submission_status is SubmissionStatus.SUCCEEDED and self.renderer is not None:
            self.renderer.acknowledge(THANK_YOU_MESSAGE)
            self.renderer.navigate(self.settings.home_route)
