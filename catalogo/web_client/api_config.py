# catalogo/web_client/api_config.py
"""
Central HTTP configuration for talking to the gateway.

Every domain call goes through the four verbs below, so errors are logged
in one place and then re-raised for the caller to display.
"""

import logging
from typing import Any, Optional

import httpx

from catalogo.core.config import settings

log = logging.getLogger(__name__)

API_BASE_URL = settings.GATEWAY_URL


class ApiClient:
    """
    Thin JSON client bound to the gateway base URL with a per-request timeout.
    An existing `httpx.Client` (for example a FastAPI TestClient) may be
    passed in instead of building one.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = settings.WEB_CLIENT_TIMEOUT_SEC,
        transport: Optional[httpx.BaseTransport] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    def _request(self, method: str, endpoint: str, data: Any = None) -> Any:
        try:
            response = self._client.request(method, endpoint, json=data)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            log.error(
                "Server error on %s %s: %s %s",
                method,
                endpoint,
                e.response.status_code,
                e.response.text,
            )
            raise
        except httpx.RequestError as e:
            log.error("Network error on %s %s: no response received (%s)", method, endpoint, e)
            raise

        if not response.content:
            return None
        return response.json()

    def get(self, endpoint: str) -> Any:
        return self._request("GET", endpoint)

    def post(self, endpoint: str, data: Any) -> Any:
        return self._request("POST", endpoint, data)

    def put(self, endpoint: str, data: Any) -> Any:
        return self._request("PUT", endpoint, data)

    def delete(self, endpoint: str) -> Any:
        # Usually empty for DELETE
        return self._request("DELETE", endpoint)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
