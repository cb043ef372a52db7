"""
Request Gateway

The single point of entry for HTTP calls to the platform REST API.
Handles:
- Composing URLs relative to the configured API root.
- Authentication (basic auth and/or token header).
- Translating RequestOptions into headers, query string and JSON body.
- Translating transport failures and error statuses into PlatformError.
"""
import logging
from typing import Any, Dict, Optional, Protocol, Union

import httpx

from atrium.modules.exceptions import (
    PlatformNotFoundError,
    PlatformServerError,
    PlatformTransportError,
)
from atrium.modules.options import RequestOptions
from atrium.modules.settings import PlatformSettings

logger = logging.getLogger("atrium.gateway")

TOKEN_HEADER = "X-Authentication-Token"
REPOSITORY_HEADER = "X-NXRepository"
SCHEMAS_HEADER = "properties"
DEPTH_HEADER = "depth"
TRANSACTION_TIMEOUT_HEADER = "Nuxeo-Transaction-Timeout"


class ResourceRequest(Protocol):
    async def get(self, options: RequestOptions) -> Any: ...

    async def post(self, options: RequestOptions) -> Any: ...

    async def put(self, options: RequestOptions) -> Any: ...

    async def delete(self, options: RequestOptions) -> Any: ...


class RequestGateway(Protocol):
    def request(self, path: str) -> ResourceRequest: ...


class HttpResourceRequest:
    """One resource path bound to an HttpRequestGateway."""

    def __init__(self, gateway: "HttpRequestGateway", path: str):
        self._gateway = gateway
        self.path = path

    async def get(self, options: RequestOptions) -> Any:
        return await self._gateway.execute("GET", self.path, options)

    async def post(self, options: RequestOptions) -> Any:
        return await self._gateway.execute("POST", self.path, options)

    async def put(self, options: RequestOptions) -> Any:
        return await self._gateway.execute("PUT", self.path, options)

    async def delete(self, options: RequestOptions) -> Any:
        return await self._gateway.execute("DELETE", self.path, options)


class HttpRequestGateway:
    """RequestGateway backed by a shared httpx.AsyncClient."""

    def __init__(
        self,
        settings: PlatformSettings,
        client: Optional[httpx.AsyncClient] = None
    ):
        self.settings = settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=settings.api_url,
            auth=settings.auth,
            timeout=settings.timeout,
        )

    def request(self, path: str) -> HttpResourceRequest:
        return HttpResourceRequest(self, path)

    async def execute(
        self,
        method: str,
        path: str,
        options: Optional[RequestOptions] = None
    ) -> Union[Any, httpx.Response]:
        """
        Send one request and return its result.

        Returns the raw httpx.Response when options.resolve_with_full_response
        is set, otherwise the parsed JSON body (None for an empty body, str for
        a non-JSON body).
        """
        options = options or RequestOptions()
        headers = self.build_headers(options)
        kwargs: Dict[str, Any] = {"headers": headers}
        if options.query_params:
            kwargs["params"] = options.query_params
        if options.body is not None:
            kwargs["json"] = options.body
        if options.timeout is not None:
            kwargs["timeout"] = options.timeout

        logger.debug(f"[HttpRequestGateway.execute] {method} {path}")
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            raise PlatformTransportError(f"{method} {path} failed: {e}") from e

        logger.debug(f"[HttpRequestGateway.execute] {method} {path} -> {response.status_code}")

        if response.status_code >= 400:
            body = _parse_body(response)
            error_cls = PlatformNotFoundError if response.status_code == 404 else PlatformServerError
            raise error_cls(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                body=body,
                response=response,
            )

        if options.resolve_with_full_response:
            return response
        return _parse_body(response)

    def build_headers(self, options: RequestOptions) -> Dict[str, str]:
        """Computed headers first, caller-supplied headers last so they win."""
        headers = {"Accept": "application/json"}
        if self.settings.token:
            headers[TOKEN_HEADER] = self.settings.token
        if options.body is not None:
            headers["Content-Type"] = "application/json"
        if options.repository_name:
            headers[REPOSITORY_HEADER] = options.repository_name
        if options.schemas:
            headers[SCHEMAS_HEADER] = ",".join(options.schemas)
        for entity_type, names in (options.enrichers or {}).items():
            headers[f"enrichers-{entity_type}"] = ",".join(names)
        for entity_type, names in (options.fetch_properties or {}).items():
            headers[f"fetch-{entity_type}"] = ",".join(names)
        if options.depth:
            headers[DEPTH_HEADER] = options.depth
        if options.transaction_timeout is not None:
            headers[TRANSACTION_TIMEOUT_HEADER] = str(options.transaction_timeout)
        headers.update(options.headers or {})
        return headers

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpRequestGateway":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
