"""HTTP transport for the OpenSea API: URLs, auth header, status mapping."""

import json
import logging
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

import httpx

from opensea_sdk.api.errors import error_from_response
from opensea_sdk.config.defaults import DEFAULT_TIMEOUT
from opensea_sdk.normalize.fields import plain_number

_default_logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, Decimal):
        return plain_number(value)
    return str(value)


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return plain_number(value)
    return str(value)


def build_query(query: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Serialize query params: keys sorted, None dropped, sequences repeated."""
    params: list[tuple[str, str]] = []
    for key in sorted(query):
        value = query[key]
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params.extend((key, _query_value(v)) for v in value if v is not None)
        else:
            params.append((key, _query_value(value)))
    return params


class ApiTransport:
    """Thin async wrapper over httpx.

    Returns the raw httpx.Response on 2xx. Any other status raises
    OpenSeaAPIError; callers never see a failed response. No retries.
    """

    def __init__(
        self,
        api_base_url: str,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: logging.Logger | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_base_url = api_base_url
        self.logger = logger or _default_logger
        self._api_key = api_key
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get(
        self, api_path: str, query: Mapping[str, Any] | None = None
    ) -> httpx.Response:
        """GET `api_path` with `query` serialized into the URL."""
        return await self._fetch("GET", api_path, params=build_query(query or {}))

    async def post(
        self,
        api_path: str,
        body: Any = None,
        method: str = "POST",
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send `body` as JSON. PUT goes through here with method overridden."""
        request_headers = {**JSON_HEADERS, **(headers or {})}
        content = json.dumps(body, default=_json_default) if body is not None else None
        return await self._fetch(
            method, api_path, content=content, headers=request_headers
        )

    async def put(
        self,
        api_path: str,
        body: Any,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        return await self.post(api_path, body, method="PUT", headers=headers)

    async def _fetch(
        self,
        method: str,
        api_path: str,
        params: list[tuple[str, str]] | None = None,
        content: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        url = f"{self.api_base_url}{api_path}"
        final_headers: dict[str, str] = {}
        if self._api_key:
            final_headers["X-API-KEY"] = self._api_key
        final_headers.update(headers or {})

        opts = json.dumps({"method": method, "params": params, "body": content})
        self.logger.debug("Sending request: %s %s...", url, opts[:100])

        try:
            response = await self._client.request(
                method, url, params=params, content=content, headers=final_headers
            )
        except httpx.RequestError as e:
            self.logger.error("Request failed: %s %s -> %s", method, url, e)
            raise
        return self._handle_api_response(response)

    def _handle_api_response(self, response: httpx.Response) -> httpx.Response:
        if response.is_success:
            self.logger.debug("Got success: %d", response.status_code)
            return response

        try:
            body = response.json()
        except ValueError:
            body = None

        self.logger.debug("Got error %d: %s", response.status_code, body)
        raise error_from_response(response.status_code, body)
