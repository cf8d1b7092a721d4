"""
Pytest configuration and fixtures for the feedback form tests.
"""
from __future__ import annotations

import json

import httpx
import pytest

from private_feedback.config import Settings
from private_feedback.controller import FeedbackFormController


FEEDBACK_URL = "https://feedback.example.test/api/feedback"


class RecordingRenderer:
    """Collects everything the controller sends to the view layer."""

    def __init__(self):
        self.views = []
        self.acknowledgements = []
        self.routes = []
        self.notices = []

    def render(self, view):
        self.views.append(view)

    def acknowledge(self, text):
        self.acknowledgements.append(text)

    def navigate(self, route):
        self.routes.append(route)

    def notice(self, text):
        self.notices.append(text)


class FakeFeedbackApi:
    """httpx.MockTransport handler recording every request it answers."""

    def __init__(self, status_code=200, body=None, exc=None):
        self.status_code = status_code
        self.body = {"success": True} if body is None else body
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def payloads(self):
        return [json.loads(request.content) for request in self.requests]


def make_settings(**overrides) -> Settings:
    values = {
        "app_name": "Private Feedback",
        "environment": "test",
        "debug": False,
        "log_level": "INFO",
        "feedback_api_url": FEEDBACK_URL,
        "feedback_timeout_seconds": 10,
        "home_route": "/",
        "wait_notice_threshold": 3,
    }
    values.update(overrides)
    return Settings(**values)


def fill_valid_form(controller):
    controller.edit_field("name", "  Jane Doe ")
    controller.edit_field("email", " jane@example.com ")
    controller.edit_field("contact", " 0300 1234567 ")
    controller.edit_field("message", "  The room was cold.  ")


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def api():
    return FakeFeedbackApi()


@pytest.fixture
async def client(api):
    async with httpx.AsyncClient(transport=httpx.MockTransport(api)) as async_client:
        yield async_client


@pytest.fixture
def controller(renderer, settings, client):
    return FeedbackFormController(renderer, settings=settings, client=client)
