import logging
import time
import uuid
import contextvars
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

REQUEST_ID_HEADER = "X-Request-ID"

# Request id of the request being handled, readable from any log record
request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    """Stamp request_id on every LogRecord so the formatter can print it."""
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get() or "-"
        return True


def setup_logging(level="INFO") -> None:
    """
    Install one stream handler on the root logger with a request-aware format.
    Safe to call more than once; later calls only adjust the level.
    """
    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)
    if any(getattr(h, "_eclat_handler", False) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler._eclat_handler = True
    fmt = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Access log for the API.

    - Reuses the caller's X-Request-ID or generates one, keeps it in a context var
      and echoes it on the response.
    - Logs request.start and request.end (status, duration_ms); unexpected errors
      are logged with their stack trace and re-raised.
    """

    async def dispatch(self, request: Request, call_next):
        req_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = request_id_ctx.set(req_id)

        logger = logging.getLogger("eclat.access")
        start = time.perf_counter()
        try:
            logger.info("request.start %s %s", request.method, request.url.path)
            response = await call_next(request)
            duration_ms = int((time.perf_counter() - start) * 1000)
            logger.info(
                "request.end %s %s -> %s (%sms)",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
            )
            response.headers[REQUEST_ID_HEADER] = req_id
            return response
        except Exception:
            duration_ms = int((time.perf_counter() - start) * 1000)
            logger.exception("request.error %s %s (%sms)", request.method, request.url.path, duration_ms)
            raise
        finally:
            request_id_ctx.reset(token)


def get_request_id() -> Optional[str]:
    return request_id_ctx.get()
