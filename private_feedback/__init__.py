from private_feedback.controller import FeedbackFormController, Renderer
from private_feedback.state import FormState, SubmissionStatus

__all__ = [
    "FeedbackFormController",
    "FormState",
    "Renderer",
    "SubmissionStatus",
]
