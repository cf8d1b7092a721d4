from __future__ import annotations

import httpx
from pydantic import ValidationError

from private_feedback.config import Settings, get_settings
from private_feedback.errors import UnknownSubmitError, error_from_exception, error_from_response
from private_feedback.schemas.feedback import FeedbackEnvelope, FeedbackPayload
from private_feedback.utils.logging import logger, redact_payload


def _get_endpoint_url(settings: Settings) -> str:
    url = settings.feedback_api_url
    if not url:
        raise RuntimeError("FEEDBACK_API_URL is not configured.")
    return url


def _parse_envelope(response: httpx.Response) -> FeedbackEnvelope:
    try:
        return FeedbackEnvelope.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        # pydantic's ValidationError is a ValueError too; both mean an unreadable body.
        raise UnknownSubmitError() from exc


async def _post(client: httpx.AsyncClient, url: str, payload: FeedbackPayload, timeout: float) -> httpx.Response:
    headers = {"Content-Type": "application/json"}
    try:
        return await client.post(url, json=payload.to_wire(), headers=headers, timeout=timeout)
    except httpx.HTTPError as exc:
        raise error_from_exception(exc) from exc


async def submit_feedback(
    payload: FeedbackPayload,
    *,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> FeedbackEnvelope:
    """POST one feedback payload and return the success envelope.

    Every failure is raised as a ``FeedbackError`` subclass, except a missing
    endpoint configuration which raises ``RuntimeError``.
    """
    settings = settings or get_settings()
    url = _get_endpoint_url(settings)
    timeout = float(settings.feedback_timeout_seconds)

    logger.info("Submitting %s feedback (rating=%s)", payload.feedback_type, payload.rating)
    logger.debug("Feedback payload: %s", redact_payload(payload.to_wire()))
    if client is not None:
        response = await _post(client, url, payload, timeout)
    else:
        async with httpx.AsyncClient(timeout=timeout) as owned_client:
            response = await _post(owned_client, url, payload, timeout)

    if response.is_error:
        raise error_from_response(response)

    envelope = _parse_envelope(response)
    if not envelope.success:
        raise UnknownSubmitError(envelope.message)
    return envelope
