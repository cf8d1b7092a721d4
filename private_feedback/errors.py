from __future__ import annotations

from typing import Any

import httpx


DEFAULT_RETRY_AFTER_SECONDS = 60

GENERIC_SUBMIT_FAILURE = "Failed to submit feedback. Please try again later."
BAD_REQUEST_FALLBACK = "Please check your input and try again."
SERVER_ERROR_MESSAGE = "Server error. Please try again later."
NETWORK_ERROR_MESSAGE = "Network error. Please check your internet connection and try again."


class FeedbackError(Exception):
    """Base class for every failure surfaced to the user as a single message."""

    default_message = GENERIC_SUBMIT_FAILURE

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class FeedbackValidationError(FeedbackError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class RateLimitedError(FeedbackError):
    def __init__(self, retry_after: int = DEFAULT_RETRY_AFTER_SECONDS) -> None:
        super().__init__(
            f"Too many requests. Please wait {retry_after} seconds and try again."
        )
        self.retry_after = retry_after


class BadRequestError(FeedbackError):
    default_message = BAD_REQUEST_FALLBACK


class ServerError(FeedbackError):
    default_message = SERVER_ERROR_MESSAGE


class NetworkError(FeedbackError):
    default_message = NETWORK_ERROR_MESSAGE


class UnknownSubmitError(FeedbackError):
    default_message = GENERIC_SUBMIT_FAILURE


def _response_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _body_message(body: dict[str, Any]) -> str | None:
    message = body.get("message")
    if isinstance(message, str) and message.strip():
        return message.strip()
    return None


def _retry_after(body: dict[str, Any]) -> int:
    value = body.get("retryAfter")
    if isinstance(value, bool):
        return DEFAULT_RETRY_AFTER_SECONDS
    try:
        seconds = int(value)
    except (TypeError, ValueError):
        return DEFAULT_RETRY_AFTER_SECONDS
    return seconds if seconds > 0 else DEFAULT_RETRY_AFTER_SECONDS


def error_from_response(response: httpx.Response) -> FeedbackError:
    """Map a non-successful Feedback API response onto the error taxonomy."""
    body = _response_body(response)
    status_code = response.status_code

    if status_code == 429:
        return RateLimitedError(_retry_after(body))
    if status_code == 400:
        return BadRequestError(_body_message(body))
    if status_code == 500:
        return ServerError()
    return UnknownSubmitError(_body_message(body))


def error_from_exception(exc: httpx.HTTPError) -> FeedbackError:
    # Timeouts are a subclass of TransportError: no response was received.
    if isinstance(exc, httpx.TransportError):
        return NetworkError()
    return UnknownSubmitError()
