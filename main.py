"""
Private Feedback — terminal runner for the negative-feedback form.
Reads each field from stdin and submits it to FEEDBACK_API_URL.
"""

import asyncio

from private_feedback.config import get_settings
from private_feedback.controller import FeedbackFormController
from private_feedback.utils.logging import setup_logging
from private_feedback.view import FormView


class TerminalRenderer:

    def __init__(self):
        self._last_error = None

    def render(self, view: FormView) -> None:
        if view.error_banner and view.error_banner != self._last_error:
            print(f"⚠️ {view.error_banner}")
        self._last_error = view.error_banner
        if view.inputs_disabled:
            print(view.submit_label)

    def acknowledge(self, text: str) -> None:
        print(f"✅ {text}")

    def navigate(self, route: str) -> None:
        print(f"→ {route}")

    def notice(self, text: str) -> None:
        print(text)


def _ask_rating() -> int | None:
    raw = input("Rating 1-5 (optional): ").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


async def run() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    controller = FeedbackFormController(TerminalRenderer(), settings=settings)
    print("We're sorry to hear that! Please tell us what went wrong.")

    star = _ask_rating()
    if star is not None:
        try:
            controller.set_rating(star)
        except ValueError as exc:
            print(exc)

    while True:
        for field, label in (
            ("name", "Name"),
            ("email", "Email"),
            ("contact", "Contact number"),
            ("message", "Message"),
        ):
            current = getattr(controller.state, field)
            value = input(f"{label} [{current}]: ") or current
            controller.edit_field(field, value)

        await controller.submit()
        if controller.state.error_message is None:
            return


if __name__ == "__main__":
    asyncio.run(run())
