from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol
from urllib.parse import quote

import httpx

from staff_api.core.exceptions import RoleDirectoryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoleInfo:
    id: str
    name: str
    limit: int


class RoleDirectory(Protocol):
    def fetch_role(self, role_id: str) -> Optional[RoleInfo]:
        ...


class HttpRoleDirectory:
    """
    Reads roles from the role service: ``GET {base_url}/role/{role_id}``.

    A 404 or an empty body means the role does not exist. Anything else that
    is not a usable role document is a RoleDirectoryError; there are no retries.
    """

    def __init__(self, base_url: str, timeout: float = 5.0, client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def _get(self, url: str) -> httpx.Response:
        if self._client is not None:
            return self._client.get(url, timeout=self.timeout)
        with httpx.Client(timeout=self.timeout) as client:
            return client.get(url)

    def fetch_role(self, role_id: str) -> Optional[RoleInfo]:
        # one opaque path segment: "?", "#" and "/" must not reshape the request
        url = f"{self.base_url}/role/{quote(role_id, safe='')}"
        try:
            resp = self._get(url)
        except httpx.HTTPError as exc:
            logger.error("Role service unreachable for role %s: %s", role_id, exc)
            raise RoleDirectoryError() from exc

        if resp.status_code == 404 or not resp.content.strip():
            return None
        if resp.status_code >= 400:
            logger.error("Role service answered %s for role %s", resp.status_code, role_id)
            raise RoleDirectoryError()

        try:
            body = resp.json()
        except ValueError as exc:
            logger.error("Role service returned non-JSON body for role %s", role_id)
            raise RoleDirectoryError() from exc

        if not body:
            return None
        try:
            role = RoleInfo(
                id=str(body.get("id") or body.get("_id") or role_id),
                name=str(body["name"]),
                limit=int(body["limit"]),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.error("Role service returned malformed role %s: %r", role_id, body)
            raise RoleDirectoryError() from exc

        if role.id != role_id:
            logger.warning("Role service answered role %s for requested role %r", role.id, role_id)
            return None
        return role
