"""JSON logging for the stylist app.

Records carry a per-request id and never the wardrobe owner's raw id: user
ids are replaced by a short stable digest so one user's calls can still be
followed through the logs. Product links, image links and free-text notes
are dropped, and clothing items are logged by id only.
"""

from __future__ import annotations

import contextlib
import contextvars
import hashlib
import json
import logging
import os
import re
import uuid
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, Optional

REQUEST_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("request_id", default=None)

# Attributes every LogRecord has; anything else arrived through ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "taskName"}
_PRIVATE_FIELDS = frozenset({"image_url", "source_url", "notes", "email"})
_EMAIL = re.compile(r"[\w.\-]+@[\w.\-]+")


def user_ref(user_id: str) -> str:
    """Stable, non-reversible handle for a wardrobe owner."""

    return "u-" + hashlib.sha256(user_id.encode("utf-8")).hexdigest()[:10]


def scrub(value: Any, key: Optional[str] = None) -> Any:
    """Make a log field safe to emit."""

    if value is None:
        return None
    if key in _PRIVATE_FIELDS:
        return "[redacted]"
    if key == "user_id" and isinstance(value, str):
        return user_ref(value)
    if isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        if value.lower().startswith(("http://", "https://")):
            return "[redacted-url]"
        return _EMAIL.sub("[redacted-email]", value)
    if isinstance(value, dict):
        return {name: scrub(inner, name) for name, inner in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [scrub(inner) for inner in value]
    item_id = getattr(value, "item_id", None)
    if isinstance(item_id, str):
        return item_id
    return type(value).__name__


def wardrobe_summary(items: Iterable[Any]) -> Dict[str, int]:
    """Count items per category, the only view of a wardrobe that gets logged."""

    return dict(Counter(getattr(item, "category", "unknown") for item in items))


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with ``extra`` fields scrubbed."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", None) or message,
            "request_id": getattr(record, "request_id", None) or REQUEST_ID.get(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and key not in payload:
                payload[key] = scrub(value, key)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: int | str | None = None) -> None:
    """Send JSON records from the root logger to stderr."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level or os.getenv("LOG_LEVEL", "INFO"), handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def current_request_id() -> str:
    """Return the active request id, assigning one when none is set."""

    request_id = REQUEST_ID.get()
    if request_id is None:
        request_id = uuid.uuid4().hex
        REQUEST_ID.set(request_id)
    return request_id


@contextlib.contextmanager
def request_scope(request_id: Optional[str] = None) -> Iterator[str]:
    """Bind a request id for the duration of one app call."""

    token = REQUEST_ID.set(request_id or REQUEST_ID.get() or uuid.uuid4().hex)
    try:
        yield REQUEST_ID.get()
    finally:
        REQUEST_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "request_id": current_request_id(), **scrub(fields)},
    )


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "current_request_id",
    "get_logger",
    "log_event",
    "request_scope",
    "scrub",
    "user_ref",
    "wardrobe_summary",
]
