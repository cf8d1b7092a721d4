from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from private_feedback.state import FormState, MAX_RATING


class FeedbackPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str
    contact: str
    message: str
    rating: int = Field(default=0, ge=0, le=MAX_RATING)
    feedback_type: Literal["sad"] = Field(default="sad", alias="feedbackType")

    @classmethod
    def from_state(cls, state: FormState) -> "FeedbackPayload":
        return cls(
            name=state.name.strip(),
            email=state.email.strip(),
            contact=state.contact.strip(),
            message=state.message.strip(),
            rating=state.rating,
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class FeedbackEnvelope(BaseModel):
    model_config = ConfigDict(extra="allow")

    success: bool = False
    message: str | None = None
