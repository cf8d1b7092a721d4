"""Unit tests for mapping Feedback API failures onto user-facing messages."""

import httpx
import pytest

from private_feedback.errors import (
    BAD_REQUEST_FALLBACK,
    GENERIC_SUBMIT_FAILURE,
    NETWORK_ERROR_MESSAGE,
    SERVER_ERROR_MESSAGE,
    BadRequestError,
    NetworkError,
    RateLimitedError,
    ServerError,
    UnknownSubmitError,
    error_from_exception,
    error_from_response,
)


def _response(status_code, body=None, text=None):
    request = httpx.Request("POST", "https://feedback.example.test/api/feedback")
    if text is not None:
        return httpx.Response(status_code, text=text, request=request)
    return httpx.Response(status_code, json=body or {}, request=request)


class TestErrorFromResponse:

    def test_rate_limited_uses_retry_after(self):
        error = error_from_response(_response(429, {"retryAfter": 30}))

        assert isinstance(error, RateLimitedError)
        assert error.retry_after == 30
        assert str(error) == "Too many requests. Please wait 30 seconds and try again."

    @pytest.mark.parametrize("body", [{}, {"retryAfter": "soon"}, {"retryAfter": -5}, {"retryAfter": None}])
    def test_rate_limited_defaults_to_sixty_seconds(self, body):
        error = error_from_response(_response(429, body))

        assert str(error) == "Too many requests. Please wait 60 seconds and try again."

    def test_bad_request_prefers_body_message(self):
        error = error_from_response(_response(400, {"message": "Email already used today"}))

        assert isinstance(error, BadRequestError)
        assert str(error) == "Email already used today"

    def test_bad_request_fallback(self):
        assert str(error_from_response(_response(400, {}))) == BAD_REQUEST_FALLBACK

    def test_server_error_ignores_body_message(self):
        error = error_from_response(_response(500, {"message": "db exploded"}))

        assert isinstance(error, ServerError)
        assert str(error) == SERVER_ERROR_MESSAGE

    def test_other_status_uses_body_message(self):
        error = error_from_response(_response(403, {"message": "Forbidden origin"}))

        assert isinstance(error, UnknownSubmitError)
        assert str(error) == "Forbidden origin"

    def test_other_status_without_json_body(self):
        error = error_from_response(_response(502, text="<html>Bad gateway</html>"))

        assert str(error) == GENERIC_SUBMIT_FAILURE


class TestErrorFromException:

    @pytest.mark.parametrize(
        "exc",
        [
            httpx.ConnectError("connection refused"),
            httpx.ReadTimeout("timed out"),
            httpx.ConnectTimeout("timed out"),
        ],
    )
    def test_transport_failures_are_network_errors(self, exc):
        error = error_from_exception(exc)

        assert isinstance(error, NetworkError)
        assert str(error) == NETWORK_ERROR_MESSAGE

    def test_other_http_errors_are_unknown(self):
        error = error_from_exception(httpx.DecodingError("malformed gzip body"))

        assert isinstance(error, UnknownSubmitError)
        assert str(error) == GENERIC_SUBMIT_FAILURE
