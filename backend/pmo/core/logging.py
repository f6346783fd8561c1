"""PMO: Logging setup and per-request access log."""
import json
import logging
import sys
import time
from datetime import datetime, timezone
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from pmo.config import Settings

logger = logging.getLogger("pmo.http")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for log shippers in production."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = getattr(record, "http", None)
        if extra:
            entry.update(extra)
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(settings: Settings) -> None:
    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))

    handler.set_name("pmo")
    root = logging.getLogger()
    root.handlers = [h for h in root.handlers if h.get_name() != "pmo"] + [handler]
    root.setLevel(settings.LOG_LEVEL.upper())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status, duration and caller for every request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, start, exc_info=True)
            raise
        self._log(request, response.status_code, start)
        return response

    @staticmethod
    def _log(request: Request, status_code: int, start: float, exc_info: bool = False) -> None:
        duration_ms = int((time.perf_counter() - start) * 1000)
        principal = getattr(request.state, "principal", None)
        user_id = str(principal.id) if principal is not None else None

        entry = {
            "method": request.method,
            "path": request.url.path,
            "statusCode": status_code,
            "duration": duration_ms,
        }
        if user_id:
            entry["userId"] = user_id

        user_info = f" [User: {user_id[:8]}...]" if user_id else ""
        level = logging.ERROR if status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s - %s - %sms%s",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
            user_info,
            extra={"http": entry},
            exc_info=exc_info,
        )
