"""
Thin JSON-over-HTTP client for the contacts backend.

Every failure comes out as a ServiceError subclass so callers only have one
family of exceptions to handle at the worker boundary.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from contactsync.errors import APIError, DecodeError, NetworkError
from contactsync.protocols import get_app_config

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Synchronous httpx wrapper. Meant to be called from BackgroundTask workers.

    Usage:
        client = HttpClient()                      # base URL from AppConfig
        contacts = client.get("/contacts", params={"orderBy": "asc"})
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        config = get_app_config()
        self._client = httpx.Client(
            base_url=base_url or config.api_base_url,
            timeout=timeout if timeout is not None else config.request_timeout_s,
            transport=transport,
        )

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, body: Any = None) -> Any:
        return self._request("POST", path, json=body)

    def put(self, path: str, body: Any = None) -> Any:
        return self._request("PUT", path, json=body)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send one request and decode the JSON body.

        Raises:
            NetworkError: Transport failure (connection refused, timeout, ...)
            APIError: Non-2xx status; carries the decoded body when there is one
            DecodeError: 2xx response whose body is not JSON
        """
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise NetworkError(f"{method} {path} failed: {e}") from e

        body = None
        if response.content:
            try:
                body = response.json()
            except ValueError as e:
                if response.is_success:
                    raise DecodeError(f"{method} {path} returned a non-JSON body") from e
                body = response.text

        if not response.is_success:
            logger.info(f"{method} {path} -> HTTP {response.status_code}")
            message = body.get("error") if isinstance(body, dict) else None
            raise APIError(response.status_code, body, message)

        logger.debug(f"{method} {path} -> HTTP {response.status_code}")
        return body
