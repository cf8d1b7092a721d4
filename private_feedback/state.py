from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


TEXT_FIELDS = ("name", "email", "contact", "message")
MULTILINE_FIELDS = frozenset({"message"})
MIN_RATING = 1
MAX_RATING = 5


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    FAILED = "failed"
    SUCCEEDED = "succeeded"


@dataclass
class FormState:
    """In-progress input and submission status for one page visit."""

    name: str = ""
    email: str = ""
    contact: str = ""
    message: str = ""
    rating: int = 0
    submission_status: SubmissionStatus = SubmissionStatus.IDLE
    error_message: str | None = None
    blocked_attempts: int = 0

    @property
    def is_submitting(self) -> bool:
        return self.submission_status is SubmissionStatus.SUBMITTING
