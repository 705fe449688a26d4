"""Wyvern order models as exposed by the OpenSea orderbook.

Prices and fees are Decimal amounts in the payment token's base unit.
Salt and timestamps are ints. Nothing here is ever a float.
"""

from dataclasses import dataclass
from decimal import Decimal

from opensea_sdk.models.asset import OpenSeaAccount, OpenSeaAsset, OpenSeaAssetBundle
from opensea_sdk.models.common import (
    FeeMethod,
    HowToCall,
    OrderSide,
    SaleKind,
    WyvernSchemaName,
)
from opensea_sdk.models.token import FungibleToken


@dataclass(frozen=True)
class WyvernAsset:
    id: str
    address: str


@dataclass(frozen=True)
class WyvernBundle:
    assets: list[WyvernAsset]
    name: str | None = None
    description: str | None = None
    external_link: str | None = None


@dataclass(frozen=True)
class OrderMetadata:
    """What an order trades: exactly one of `asset` or `bundle` is set."""

    schema: WyvernSchemaName
    asset: WyvernAsset | None = None
    bundle: WyvernBundle | None = None

    @property
    def is_bundle(self) -> bool:
        return self.bundle is not None


@dataclass(frozen=True)
class UnhashedOrder:
    exchange: str
    maker: str
    taker: str
    maker_relayer_fee: Decimal
    taker_relayer_fee: Decimal
    maker_protocol_fee: Decimal
    taker_protocol_fee: Decimal
    maker_referrer_fee: Decimal
    fee_recipient: str
    fee_method: FeeMethod
    side: OrderSide
    sale_kind: SaleKind
    target: str
    how_to_call: HowToCall
    calldata: str
    replacement_pattern: str
    static_target: str
    static_extradata: str
    payment_token: str
    base_price: Decimal
    extra: Decimal
    listing_time: int
    expiration_time: int
    salt: int
    metadata: OrderMetadata
    waiting_for_best_counter_order: bool


@dataclass(frozen=True)
class UnsignedOrder(UnhashedOrder):
    hash: str


@dataclass(frozen=True)
class Order(UnsignedOrder):
    v: int
    r: str
    s: str
    current_price: Decimal = Decimal(0)
    current_bounty: Decimal = Decimal(0)
    created_time: int | None = None
    maker_account: OpenSeaAccount | None = None
    taker_account: OpenSeaAccount | None = None
    fee_recipient_account: OpenSeaAccount | None = None
    payment_token_contract: FungibleToken | None = None
    cancelled_or_finalized: bool = False
    marked_invalid: bool = False
    asset: OpenSeaAsset | None = None
    asset_bundle: OpenSeaAssetBundle | None = None


@dataclass(frozen=True)
class OrderPage:
    """One page of orders.

    `count` is the backend total for versioned responses and the page
    length for legacy ones.
    """

    orders: list[Order]
    count: int
