import logging
import time
import uuid as uuidlib

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from staff_api.core.logging import request_id_var

logger = logging.getLogger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and exposes the logged-in staff id.

    Must sit inside SessionMiddleware so that ``request.session`` is populated.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuidlib.uuid4())
        token = request_id_var.set(request_id)

        request.state.request_id = request_id
        request.state.staff_id = request.session.get("staff_id") if "session" in request.scope else None

        started = time.perf_counter()
        try:
            resp = await call_next(request)
        finally:
            request_id_var.reset(token)

        logger.info(
            "%s %s -> %s (%.1f ms) [%s]",
            request.method,
            request.url.path,
            resp.status_code,
            (time.perf_counter() - started) * 1000,
            request_id,
        )
        resp.headers["X-Request-ID"] = request_id
        return resp
