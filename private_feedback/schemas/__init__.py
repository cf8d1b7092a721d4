from private_feedback.schemas.feedback import FeedbackEnvelope, FeedbackPayload

__all__ = [
    "FeedbackEnvelope",
    "FeedbackPayload",
]
