from __future__ import annotations

import logging
import re
from logging.config import dictConfig


EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"\+?\d[\d\s().-]{7,}\d")


class _PIIRedactionFilter(logging.Filter):
    """Feedback forms carry emails and phone numbers; keep them out of logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact(record.msg)
        if record.args:
            record.args = tuple(redact(arg) if isinstance(arg, str) else arg for arg in record.args)
        return True


def redact(value: str) -> str:
    value = EMAIL_RE.sub("[redacted-email]", value)
    value = PHONE_RE.sub("[redacted-phone]", value)
    return value


PII_PAYLOAD_FIELDS = frozenset({"name", "email", "contact"})


def redact_payload(payload: dict) -> dict:
    """Mask the submitter's identity fields; contact is free text so it is masked whole."""
    return {
        key: f"[redacted-{key}]" if key in PII_PAYLOAD_FIELDS and value else value
        for key, value in payload.items()
    }


def setup_logging(level: str = "INFO") -> None:
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "redact_pii": {
                    "()": _PIIRedactionFilter,
                }
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["redact_pii"],
                }
            },
            "root": {
                "handlers": ["console"],
                "level": level,
            },
        }
    )


logger = logging.getLogger("private_feedback")
