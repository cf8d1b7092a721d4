from __future__ import annotations

from dataclasses import dataclass

from private_feedback.state import MAX_RATING, MIN_RATING, MULTILINE_FIELDS, FormState


SUBMIT_LABEL = "Submit Feedback"
SUBMITTING_LABEL = "Submitting..."


@dataclass(frozen=True)
class FormView:
    """Snapshot of everything a renderer needs to draw the form."""

    name: str
    email: str
    contact: str
    message: str
    rating: int
    inputs_disabled: bool
    error_banner: str | None
    stars: tuple[bool, ...]
    rating_caption: str
    submit_label: str


def rating_caption(rating: int) -> str:
    if rating <= 0:
        return ""
    return f"You rated: {rating} star{'s' if rating > 1 else ''}"


def submits_on_enter(field_name: str) -> bool:
    return field_name not in MULTILINE_FIELDS


def build_view(state: FormState) -> FormView:
    disabled = state.is_submitting
    return FormView(
        name=state.name,
        email=state.email,
        contact=state.contact,
        message=state.message,
        rating=state.rating,
        inputs_disabled=disabled,
        error_banner=state.error_message or None,
        stars=tuple(star <= state.rating for star in range(MIN_RATING, MAX_RATING + 1)),
        rating_caption=rating_caption(state.rating),
        submit_label=SUBMITTING_LABEL if disabled else SUBMIT_LABEL,
    )
