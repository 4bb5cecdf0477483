from __future__ import annotations

"""Logger naming, stderr configuration and I/O tracing for pullclip.

All loggers live under the ``pullclip`` tree and write to a single stderr
handler owned by the base logger; stdout belongs to `emit` and usage text.

Environment switches:
    PULLCLIP_JSON_LOGS=1  JSON lines instead of ``LEVEL: message``.
    PULLCLIP_TRACE_IO=1   debug traces for every request and file read.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

BASE_LOGGER = "pullclip"
TRACE_IO_ENV = "PULLCLIP_TRACE_IO"
JSON_LOGS_ENV = "PULLCLIP_JSON_LOGS"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: ts, level, module, msg, version and optional ctx."""

    def __init__(self) -> None:
        super().__init__()
        self._version = _package_version()

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = {k: _jsonable(v) for k, v in ctx.items()}
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _package_version() -> str:
    # pullclip/__init__ imports this module indirectly; read the attribute late.
    pkg = sys.modules.get(BASE_LOGGER)
    return str(getattr(pkg, "__version__", "unknown"))


def _jsonable(value):
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


class _PullClipHandler(logging.StreamHandler):
    """Marker type so reconfiguration finds the handler it installed."""


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Install (or re-point) the stderr handler on the base logger and return it.

    Calling it again swaps the formatter and stream in place, so a process never
    ends up with duplicated output lines.
    """
    base = logging.getLogger(BASE_LOGGER)
    if is_trace_io_enabled():
        level = min(level, logging.DEBUG)
    base.setLevel(level)
    base.propagate = False

    handler = next((h for h in base.handlers if isinstance(h, _PullClipHandler)), None)
    if handler is None:
        handler = _PullClipHandler(stream or sys.stderr)
        base.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)

    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(_PLAIN_FORMAT))
    return base


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``pullclip`` or the ``pullclip.<name>`` child logger."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def json_logs_requested(environ=None) -> bool:
    env = os.environ if environ is None else environ
    return env.get(JSON_LOGS_ENV) == "1"


def is_trace_io_enabled() -> bool:
    return os.getenv(TRACE_IO_ENV) == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Debug-level I/O trace, emitted only when PULLCLIP_TRACE_IO=1."""
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | %s", message, " ".join(f"{k}={v}" for k, v in ctx.items()), extra={"context": ctx})
    else:
        logger.debug("%s", message)
