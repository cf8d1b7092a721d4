from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from urllib.parse import urlparse

from dotenv import load_dotenv


PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_FILE = PROJECT_ROOT / ".env"
load_dotenv(ENV_FILE, override=False)


def _as_bool(value: str | None, *, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(
    value: str | None,
    *,
    default: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    if value is None or not value.strip():
        parsed = default
    else:
        try:
            parsed = int(value.strip())
        except ValueError as exc:
            raise ValueError(f"Expected integer value, got: {value!r}") from exc

    if min_value is not None and parsed < min_value:
        raise ValueError(f"Integer value {parsed} is less than allowed minimum {min_value}.")
    if max_value is not None and parsed > max_value:
        raise ValueError(f"Integer value {parsed} exceeds allowed maximum {max_value}.")
    return parsed


def _normalize_endpoint_url(raw_url: str | None) -> str:
    url = (raw_url or "").strip()
    if not url:
        return ""

    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("FEEDBACK_API_URL must be an http(s) URL.")
    return url


def _normalize_route(raw_route: str | None) -> str:
    route = (raw_route or "").strip() or "/"
    if not route.startswith("/"):
        route = "/" + route
    return route


@dataclass(frozen=True)
class Settings:
    app_name: str
    environment: str
    debug: bool
    log_level: str

    feedback_api_url: str
    feedback_timeout_seconds: int
    home_route: str
    wait_notice_threshold: int


def _validate_for_production(settings: Settings) -> None:
    if settings.environment != "production":
        return

    missing: list[str] = []
    if not settings.feedback_api_url:
        missing.append("FEEDBACK_API_URL")
    if missing:
        raise RuntimeError(
            "Missing required environment variables for production: " + ", ".join(missing)
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    environment = (os.getenv("APP_ENV") or "development").strip().lower()
    debug = _as_bool(os.getenv("DEBUG"), default=environment != "production")
    settings = Settings(
        app_name=(os.getenv("APP_NAME") or "Private Feedback").strip(),
        environment=environment,
        debug=debug,
        log_level=(os.getenv("LOG_LEVEL") or ("DEBUG" if debug else "INFO")).strip().upper(),
        feedback_api_url=_normalize_endpoint_url(os.getenv("FEEDBACK_API_URL")),
        feedback_timeout_seconds=_as_int(
            os.getenv("FEEDBACK_TIMEOUT_SECONDS"),
            default=10,
            min_value=1,
            max_value=120,
        ),
        home_route=_normalize_route(os.getenv("FEEDBACK_HOME_ROUTE")),
        wait_notice_threshold=_as_int(
            os.getenv("FEEDBACK_WAIT_NOTICE_THRESHOLD"),
            default=3,
            min_value=1,
            max_value=100,
        ),
    )

    _validate_for_production(settings)
    return settings
