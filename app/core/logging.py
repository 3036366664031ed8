import logging
import sys
from typing import Final
from collections.abc import Mapping
from logging import LoggerAdapter, LogRecord
from typing_extensions import override
from fastapi import Request

_LOG_FORMAT: Final[str] = (
    "%(asctime)s %(levelname)s %(name)s :: %(message)s [req=%(request_id)s]"
)

# Request lines come from CorrelationIdMiddleware, so uvicorn's own access
# log is kept to warnings and above.
_ACCESS_LOGGER: Final[str] = "uvicorn.access"


class RequestLogFilter(logging.Filter):
    """Default request_id for records logged outside a request."""

    @override
    def filter(self, record: LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    One stdout handler shared by the root and uvicorn loggers.
    `level` may be a number or a name such as "debug" (LOG_LEVEL setting).
    """
    level = _resolve_level(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(RequestLogFilter())
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)

    for name in ("uvicorn", "uvicorn.error", _ACCESS_LOGGER):
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.setLevel(max(level, logging.WARNING) if name == _ACCESS_LOGGER else level)
        lg.addHandler(handler)
        lg.propagate = False


def get_logger(
    name: str,
    request: Request | None = None
) -> LoggerAdapter[logging.Logger]:
    """
    Logger tagged with the request's correlation id, when there is a request.
    Usage: logger = get_logger(__name__, request)
    """
    extra: Mapping[str, str] = {}
    if request is not None:
        extra["request_id"] = getattr(request.state, "correlation_id", "-")
    return LoggerAdapter(logging.getLogger(name), extra)
