from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, no_store_prefixes: tuple = ("/staff",)):
        super().__init__(app)
        self.no_store_prefixes = no_store_prefixes

    async def dispatch(self, request: Request, call_next) -> Response:
        resp = await call_next(request)

        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["Referrer-Policy"] = "no-referrer"

        # staff records carry personal data (cnic, phone)
        if request.url.path.startswith(self.no_store_prefixes):
            resp.headers["Cache-Control"] = "no-store"

        return resp
