"""Pydantic v2 client configuration with strict validation."""

from pydantic import BaseModel, Field

from opensea_sdk.config.defaults import (
    API_BASE_URLS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT,
    ORDERBOOK_VERSION,
    SITE_HOSTS,
)
from opensea_sdk.models.common import Network


class OpenSeaAPIConfig(BaseModel):
    model_config = {"extra": "forbid"}

    network_name: Network = Network.MAIN
    api_key: str | None = None
    api_base_url: str | None = None
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    orderbook_version: int = Field(default=ORDERBOOK_VERSION, ge=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0)

    def resolved_api_base_url(self) -> str:
        """Explicit `api_base_url` wins over the network's endpoint."""
        return (self.api_base_url or API_BASE_URLS[self.network_name]).rstrip("/")

    def site_host(self) -> str:
        return SITE_HOSTS[self.network_name]
