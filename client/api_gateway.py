"""Single entry point for every call the client makes to the API."""

import logging
from collections.abc import Callable
from typing import Any

import httpx

from client import config
from client.errors import ApiError, NetworkError, UnauthorizedError
from client.session import SessionStore

logger = logging.getLogger(__name__)


class ApiGateway:
    """Wraps `httpx.Client` with bearer-token injection and envelope unwrapping.

    A 401 clears the session and calls `on_unauthorized` (the place a UI would
    send the user back to the login screen). Transport failures surface as
    `NetworkError` so callers can decide whether to fall back to local data.
    """

    def __init__(
        self,
        session: SessionStore,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
        on_unauthorized: Callable[[], None] | None = None,
    ):
        self.session = session
        self.on_unauthorized = on_unauthorized
        self._client = httpx.Client(
            base_url=base_url or config.API_BASE_URL,
            timeout=timeout if timeout is not None else config.API_TIMEOUT_SECONDS,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _auth_headers(self) -> dict[str, str]:
        token = self.session.token
        # Fabricated demo tokens are never valid on the server.
        if not token or token.startswith("demo-"):
            return {}
        return {"Authorization": f"Bearer {token}"}

    def request(self, method: str, path: str, **kwargs) -> Any:
        headers = {**self._auth_headers(), **kwargs.pop("headers", {})}
        try:
            response = self._client.request(method, path, headers=headers, **kwargs)
        except httpx.TransportError as exc:
            logger.error("Network error on %s %s: %s", method, path, exc)
            raise NetworkError() from exc

        body = self._parse_body(response)
        message = body.get("message") if isinstance(body, dict) else None

        if response.status_code == 401:
            self.session.clear()
            if self.on_unauthorized is not None:
                self.on_unauthorized()
            raise UnauthorizedError(message or "Unauthorized")

        if response.is_error:
            raise ApiError(
                message or "An error occurred",
                status_code=response.status_code,
                data=body.get("data") if isinstance(body, dict) else None,
            )

        if isinstance(body, dict) and "success" in body:
            if not body["success"]:
                raise ApiError(message or "An error occurred", status_code=response.status_code)
            return body.get("data")
        return body

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def get(self, path: str, **kwargs) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, data: Any = None, **kwargs) -> Any:
        return self.request("POST", path, json=data, **kwargs)

    def put(self, path: str, data: Any = None, **kwargs) -> Any:
        return self.request("PUT", path, json=data, **kwargs)

    def patch(self, path: str, data: Any = None, **kwargs) -> Any:
        return self.request("PATCH", path, json=data, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self.request("DELETE", path, **kwargs)
