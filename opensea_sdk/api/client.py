"""OpenSea API client: orderbook queries, posting orders, asset lookups."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from opensea_sdk.api.orderbook_schema import OrderbookSchema, schema_for_version
from opensea_sdk.api.transport import ApiTransport
from opensea_sdk.config.defaults import API_VERSION
from opensea_sdk.config.schema import OpenSeaAPIConfig
from opensea_sdk.models.asset import (
    AssetPage,
    BundlePage,
    OpenSeaAsset,
    OpenSeaAssetBundle,
)
from opensea_sdk.models.order import Order, OrderPage, UnhashedOrder
from opensea_sdk.models.token import FungibleToken
from opensea_sdk.normalize.asset_parser import asset_bundle_from_json, asset_from_json
from opensea_sdk.normalize.errors import ParseError
from opensea_sdk.normalize.order_parser import order_from_json
from opensea_sdk.normalize.order_serializer import order_to_json
from opensea_sdk.normalize.token_parser import token_from_json

_default_logger = logging.getLogger(__name__)

API_PATH = f"/api/v{API_VERSION}"


class OpenSeaAPI:
    """Async client for the OpenSea orderbook and asset API.

    Each method makes exactly one HTTP request. `page_size` may be changed
    at any time and applies to calls made afterwards; it is not locked, so
    a change can be seen by calls already in flight.

    `logger` receives debug lines before and after each request. The
    default module logger is silent unless the application configures
    logging.
    """

    def __init__(
        self,
        config: OpenSeaAPIConfig | None = None,
        logger: logging.Logger | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        config = config or OpenSeaAPIConfig()
        self.config = config
        self.api_base_url = config.resolved_api_base_url()
        self.host_url = config.site_host()
        self.page_size = config.page_size
        self.logger = logger or _default_logger
        self.orderbook_path = f"/wyvern/v{config.orderbook_version}"
        self.orderbook_schema: OrderbookSchema = schema_for_version(
            config.orderbook_version
        )
        self.transport = ApiTransport(
            self.api_base_url,
            api_key=config.api_key,
            timeout=config.timeout,
            logger=self.logger,
            http_client=http_client,
        )

    async def __aenter__(self) -> "OpenSeaAPI":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.transport.aclose()

    def _page_params(self, query: Mapping[str, Any] | None, page: int) -> dict[str, Any]:
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        page_size = self.page_size
        return {
            **(query or {}),
            "limit": page_size,
            "offset": (page - 1) * page_size,
        }

    # --- Orderbook ---

    async def post_order(self, order: UnhashedOrder | Mapping[str, Any]) -> Order:
        """Send an order to the orderbook. Raises OpenSeaAPIError if rejected.

        Accepts an order model or an already serialized OrderJSON dict.
        """
        body = order_to_json(order) if isinstance(order, UnhashedOrder) else dict(order)
        response = await self.transport.post(f"{self.orderbook_path}/orders/post", body)
        return order_from_json(_json(response))

    async def get_order(self, query: Mapping[str, Any] | None = None) -> Order | None:
        """Return the first order matching `query`, or None if there is none."""
        response = await self.transport.get(f"{self.orderbook_path}/orders", query)
        return self.orderbook_schema.decode_first(_json(response))

    async def get_orders(
        self, query: Mapping[str, Any] | None = None, page: int = 1
    ) -> OrderPage:
        """Fetch one page (1-based) of orders matching `query`."""
        response = await self.transport.get(
            f"{self.orderbook_path}/orders", self._page_params(query, page)
        )
        return self.orderbook_schema.decode_page(_json(response))

    # --- Assets and bundles ---

    async def get_asset(
        self, token_address: str, token_id: str | int
    ) -> OpenSeaAsset | None:
        response = await self.transport.get(
            f"{API_PATH}/asset/{token_address}/{token_id}"
        )
        data = _json_or_none(response)
        return asset_from_json(data) if data else None

    async def get_assets(
        self, query: Mapping[str, Any] | None = None, page: int = 1
    ) -> AssetPage:
        response = await self.transport.get(
            f"{API_PATH}/assets/", self._page_params(query, page)
        )
        data = _require_object(_json(response), "assets")
        return AssetPage(
            assets=[asset_from_json(a) for a in data["assets"]],
            estimated_count=_estimated_count(data),
        )

    async def get_bundle(self, slug: str) -> OpenSeaAssetBundle | None:
        response = await self.transport.get(f"{API_PATH}/bundle/{slug}/")
        data = _json_or_none(response)
        return asset_bundle_from_json(data) if data else None

    async def get_bundles(
        self, query: Mapping[str, Any] | None = None, page: int = 1
    ) -> BundlePage:
        response = await self.transport.get(
            f"{API_PATH}/bundles/", self._page_params(query, page)
        )
        data = _require_object(_json(response), "bundles")
        return BundlePage(
            bundles=[asset_bundle_from_json(b) for b in data["bundles"]],
            estimated_count=_estimated_count(data),
        )

    # --- Tokens ---

    async def get_tokens(
        self, query: Mapping[str, Any] | None = None, page: int = 1
    ) -> list[FungibleToken]:
        """Fetch payment tokens, e.g. `{"symbol": "WETH"}`."""
        response = await self.transport.get(
            f"{API_PATH}/tokens/", self._page_params(query, page)
        )
        data = _json(response)
        if not isinstance(data, list):
            raise ParseError("tokens response must be a list")
        return [token_from_json(t) for t in data]


def _require_object(data: Any, list_key: str) -> dict:
    if not isinstance(data, dict) or not isinstance(data.get(list_key), list):
        raise ParseError(f"response must be an object with a '{list_key}' list")
    return data


def _estimated_count(data: dict) -> int:
    count = data.get("estimated_count", 0)
    if isinstance(count, bool) or not isinstance(count, int):
        raise ParseError("'estimated_count' must be an integer", field="estimated_count")
    return count


def _json_or_none(response: httpx.Response) -> Any:
    # An empty body is a miss, same as a JSON null
    return _json(response) if response.content else None


def _json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f"response body is not valid JSON: {e}") from e
