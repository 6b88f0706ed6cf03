from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response


@dataclass
class RateLimitRule:
    window_sec: int
    max_requests: int


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    In-memory sliding-window limiter for a fixed set of paths (login).
    State lives in this process only; several workers each keep their own window.
    """
    def __init__(self, app, rule: RateLimitRule, paths: Iterable[str], key_prefix: str = "rl"):
        super().__init__(app)
        self.rule = rule
        self.paths = frozenset(paths)
        self.key_prefix = key_prefix
        self.buckets: Dict[str, Deque[float]] = {}

    def _key(self, request: Request) -> str:
        ip = request.client.host if request.client else "unknown"
        return f"{self.key_prefix}:{ip}:{request.url.path}"

    def _prune(self, now: float) -> None:
        """Drop expired hits everywhere and forget clients with none left."""
        window_start = now - self.rule.window_sec
        for key in list(self.buckets):
            hits = self.buckets[key]
            while hits and hits[0] < window_start:
                hits.popleft()
            if not hits:
                del self.buckets[key]

    def _allow(self, key: str, now: float) -> bool:
        self._prune(now)
        hits = self.buckets.setdefault(key, deque())
        if len(hits) >= self.rule.max_requests:
            return False
        hits.append(now)
        return True

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method != "POST" or request.url.path not in self.paths:
            return await call_next(request)

        if not self._allow(self._key(request), time.time()):
            return JSONResponse(
                status_code=429,
                content={"message": "Too many login attempts. Try again later."},
                headers={"Retry-After": str(self.rule.window_sec)},
            )
        return await call_next(request)
