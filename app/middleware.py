import logging
from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import JSONResponse

from .errors import InternalError

logger = logging.getLogger("product-api")

def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def request_line(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url += "?" + request.url.query
    return f"[{_iso_now()}] {request.method} {url}"

# ---------------------------
# Request logger (runs before routing)
# ---------------------------
async def log_requests(request: Request, call_next):
    logger.info(request_line(request))
    return await call_next(request)

# ---------------------------
# Global error handler
# ---------------------------
async def catch_all_errors(request: Request, call_next):
    """
    Last line of defence: anything a route lets escape becomes a 500 with
    the generic error body. Nothing is re-raised, the server keeps serving.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Error: %s", exc)
        status, body = InternalError().as_response()
        return JSONResponse(status_code=status, content=body)
