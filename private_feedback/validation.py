from __future__ import annotations

import re

from private_feedback.errors import FeedbackValidationError
from private_feedback.state import FormState


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_REQUIRED = "Please enter your name"
EMAIL_REQUIRED = "Please enter your email"
EMAIL_INVALID = "Please enter a valid email address"
CONTACT_REQUIRED = "Please enter your contact number"
MESSAGE_REQUIRED = "Please enter your message"


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(value))


def validate_form(state: FormState) -> None:
    """Check the form in display order and raise on the first problem."""
    if not state.name.strip():
        raise FeedbackValidationError("name", NAME_REQUIRED)
    if not state.email.strip():
        raise FeedbackValidationError("email", EMAIL_REQUIRED)
    if not is_valid_email(state.email.strip()):
        raise FeedbackValidationError("email", EMAIL_INVALID)
    if not state.contact.strip():
        raise FeedbackValidationError("contact", CONTACT_REQUIRED)
    if not state.message.strip():
        raise FeedbackValidationError("message", MESSAGE_REQUIRED)
