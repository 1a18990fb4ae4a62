# catalogo/services/gateway_proxy.py

import logging
from typing import Dict, List, Mapping, Optional, Tuple

import httpx

from catalogo.core.config import settings
from catalogo.core.exceptions import RouteNotFound, UpstreamTimeout, UpstreamUnavailable

log = logging.getLogger(__name__)

# Headers that describe a single connection and must not be forwarded.
HOP_BY_HOP_HEADERS = {
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailers",
    "transfer-encoding",
    "upgrade",
    "host",
    "content-length",
}

# The upstream body is already decoded by httpx.
RESPONSE_EXCLUDED_HEADERS = HOP_BY_HOP_HEADERS | {"content-encoding"}

REQUEST_TIMEOUT_HEADER = "X-Request-Timeout"


def default_routes() -> Dict[str, str]:
    return {
        "/api/categorias": settings.CATEGORIA_SERVICE_URL,
        "/api/productos": settings.PRODUCTO_SERVICE_URL,
    }


class GatewayProxy:
    """
    Dispatches requests by path prefix to the backing services.
    Method, path, query, body and end-to-end headers pass through unchanged.
    """

    def __init__(
        self,
        routes: Optional[Mapping[str, str]] = None,
        timeout: float = settings.GATEWAY_TIMEOUT_SEC,
        forward_margin: float = settings.GATEWAY_FORWARD_MARGIN_SEC,
        transports: Optional[Mapping[str, httpx.AsyncBaseTransport]] = None,
    ):
        self.routes = dict(routes if routes is not None else default_routes())
        self.timeout = timeout
        self.forward_margin = forward_margin
        # Optional per-prefix transport, used to wire services in-process.
        self.transports = dict(transports or {})

    def resolve(self, path: str) -> Tuple[str, str]:
        """
        Returns (prefix, upstream base URL) for the longest matching prefix.
        """
        for prefix in sorted(self.routes, key=len, reverse=True):
            if path == prefix or path.startswith(prefix + "/"):
                return prefix, self.routes[prefix].rstrip("/")
        raise RouteNotFound(f"No hay ruta para {path}")

    def _budget(self, headers: Mapping[str, str]) -> float:
        raw = headers.get(REQUEST_TIMEOUT_HEADER)
        if raw is None:
            return self.timeout
        try:
            requested = float(raw)
        except ValueError:
            return self.timeout
        return min(self.timeout, requested) if requested > 0 else self.timeout

    def downstream_budget(self, budget: float) -> float:
        """
        Budget advertised upstream: ours minus the margin, never below half.
        """
        return max(budget - self.forward_margin, budget / 2)

    def _forward_headers(self, headers: Mapping[str, str], budget: float) -> Dict[str, str]:
        excluded = HOP_BY_HOP_HEADERS | {REQUEST_TIMEOUT_HEADER.lower()}
        forwarded = {k: v for k, v in headers.items() if k.lower() not in excluded}
        forwarded[REQUEST_TIMEOUT_HEADER] = str(self.downstream_budget(budget))
        return forwarded

    async def forward(
        self,
        method: str,
        path: str,
        query: str,
        headers: Mapping[str, str],
        body: bytes,
    ) -> httpx.Response:
        prefix, upstream = self.resolve(path)
        budget = self._budget(headers)
        url = f"{upstream}{path}"
        if query:
            url = f"{url}?{query}"

        try:
            async with httpx.AsyncClient(
                timeout=budget, transport=self.transports.get(prefix)
            ) as client:
                resp = await client.request(
                    method,
                    url,
                    headers=self._forward_headers(headers, budget),
                    content=body,
                )
        except httpx.TimeoutException as e:
            log.warning("Upstream %s timed out after %ss: %s", upstream, budget, e)
            raise UpstreamTimeout(f"{upstream} no respondio en {budget}s") from e
        except httpx.RequestError as e:
            log.warning("Upstream %s unreachable: %s", upstream, e)
            raise UpstreamUnavailable(f"{upstream} no esta disponible") from e

        level = logging.WARNING if resp.status_code >= 500 else logging.INFO
        log.log(level, "%s %s -> %s %s", method, path, upstream, resp.status_code)
        return resp

    @staticmethod
    def response_headers(resp: httpx.Response) -> List[Tuple[str, str]]:
        """Upstream headers as pairs, so repeated ones like set-cookie survive."""
        return [
            (k, v)
            for k, v in resp.headers.multi_items()
            if k.lower() not in RESPONSE_EXCLUDED_HEADERS
        ]
