# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Structured JSON logging, tagged with the id of the request being served."""
import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# set by RequestIDMiddleware for the duration of one request
current_request_id: ContextVar[Optional[str]] = ContextVar("current_request_id", default=None)


class RequestIDFilter(logging.Filter):
    """Stamp records with the active request id, if any."""

    def filter(self, record: logging.LogRecord) -> bool:
        request_id = current_request_id.get()
        if request_id is not None and not hasattr(record, "request_id"):
            record.request_id = request_id
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": "team-directory",
            "logger": record.name,
            "msg": record.getMessage(),
        }
        request_id = getattr(record, "request_id", None)
        if request_id:
            log_obj["request_id"] = request_id
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj)


def get_logger(name: str = "team-directory") -> logging.Logger:
    from team_directory.core.config import settings
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.handlers = [handler]
        logger.addFilter(RequestIDFilter())
        logger.setLevel(settings.LOG_LEVEL)
    return logger
