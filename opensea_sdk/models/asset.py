"""Asset, asset contract, account and bundle models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from opensea_sdk.models.order import Order


@dataclass(frozen=True)
class OpenSeaAccount:
    """Account metadata attached to orders, assets and bundles."""

    address: str
    config: str = ""
    profile_img_url: str = ""
    username: str | None = None


@dataclass(frozen=True)
class Asset:
    token_id: str
    token_address: str


@dataclass(frozen=True)
class OpenSeaAssetContract:
    name: str
    address: str
    seller_fee_basis_points: int
    buyer_fee_basis_points: int
    opensea_seller_fee_basis_points: int
    opensea_buyer_fee_basis_points: int
    dev_seller_fee_basis_points: int
    dev_buyer_fee_basis_points: int
    description: str = ""
    token_symbol: str = ""
    image_url: str = ""
    stats: dict[str, Any] | None = None
    traits: list[dict[str, Any]] | None = None
    external_link: str | None = None
    wiki_link: str | None = None


@dataclass(frozen=True)
class OpenSeaAsset(Asset):
    asset_contract: OpenSeaAssetContract
    name: str | None
    description: str | None
    owner: OpenSeaAccount | None
    orders: list[Order] | None = None
    buy_orders: list[Order] | None = None
    sell_orders: list[Order] | None = None
    is_presale: bool = False
    image_url: str | None = None
    image_preview_url: str | None = None
    image_url_original: str | None = None
    image_url_thumbnail: str | None = None
    opensea_link: str | None = None
    external_link: str | None = None
    traits: list[dict[str, Any]] = field(default_factory=list)
    num_sales: int = 0
    last_sale: dict[str, Any] | None = None
    background_color: str | None = None


@dataclass(frozen=True)
class OpenSeaAssetBundle:
    """A named group of assets sold together in one order.

    Bundles reference their assets; assets never point back at a bundle.
    """

    maker: OpenSeaAccount | None
    assets: list[OpenSeaAsset]
    name: str
    slug: str
    permalink: str
    sell_orders: list[Order] | None = None
    description: str | None = None
    external_link: str | None = None


@dataclass(frozen=True)
class AssetPage:
    assets: list[OpenSeaAsset]
    estimated_count: int


@dataclass(frozen=True)
class BundlePage:
    bundles: list[OpenSeaAssetBundle]
    estimated_count: int
