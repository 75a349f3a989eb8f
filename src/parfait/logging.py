from __future__ import annotations

import contextlib
import contextvars
import logging
import sys
from pathlib import Path
from typing import IO, Any, Iterator

import orjson

_lookup_context: contextvars.ContextVar[dict[str, Any]] = contextvars.ContextVar("lookup_context", default={})

# LogRecord attributes that are either folded into the payload or just noise.
_SKIPPED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


class ORJSONFormatter(logging.Formatter):
    """One JSON object per record.

    Fields bound with :func:`lookup_context` (application, page) are merged
    in, as is anything passed through ``extra=``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_lookup_context.get())
        for key, value in vars(record).items():
            if key in _SKIPPED_ATTRS or key.startswith("_") or key in payload:
                continue
            payload[key] = value
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode()


def setup_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Send JSON records to ``stream`` (stdout by default) and optionally ``log_file``."""

    root = logging.getLogger()
    root.setLevel(log_level.upper())
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = ORJSONFormatter()
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


@contextlib.contextmanager
def lookup_context(**fields: Any) -> Iterator[None]:
    """Bind ``fields`` to every record logged inside the block."""

    token = _lookup_context.set({**_lookup_context.get(), **fields})
    try:
        yield
    finally:
        _lookup_context.reset(token)
