"""Normalize asset, asset contract, account and bundle records."""

from typing import Any

from opensea_sdk.models.asset import (
    OpenSeaAccount,
    OpenSeaAsset,
    OpenSeaAssetBundle,
    OpenSeaAssetContract,
)
from opensea_sdk.models.common import OrderSide
from opensea_sdk.normalize import order_parser
from opensea_sdk.normalize.errors import ParseError
from opensea_sdk.normalize.fields import require, require_str, to_int


def account_from_json(raw: Any) -> OpenSeaAccount:
    user = raw.get("user") if isinstance(raw, dict) else None
    return OpenSeaAccount(
        address=require_str(raw, "address", "account"),
        config=raw.get("config") or "",
        profile_img_url=raw.get("profile_img_url") or "",
        username=user.get("username") if isinstance(user, dict) else None,
    )


def asset_contract_from_json(raw: Any) -> OpenSeaAssetContract:
    context = "asset_contract"

    def bps(key: str) -> int:
        return to_int(raw.get(key) or 0, key)

    return OpenSeaAssetContract(
        name=require_str(raw, "name", context),
        address=require_str(raw, "address", context),
        seller_fee_basis_points=bps("seller_fee_basis_points"),
        buyer_fee_basis_points=bps("buyer_fee_basis_points"),
        opensea_seller_fee_basis_points=bps("opensea_seller_fee_basis_points"),
        opensea_buyer_fee_basis_points=bps("opensea_buyer_fee_basis_points"),
        dev_seller_fee_basis_points=bps("dev_seller_fee_basis_points"),
        dev_buyer_fee_basis_points=bps("dev_buyer_fee_basis_points"),
        description=raw.get("description") or "",
        token_symbol=raw.get("symbol") or "",
        image_url=raw.get("image_url") or "",
        stats=raw.get("stats"),
        traits=raw.get("traits"),
        external_link=raw.get("external_link"),
        wiki_link=raw.get("wiki_link"),
    )


def _orders_or_none(raw: dict, key: str) -> list | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise ParseError(f"field '{key}' must be a list", field=key)
    return [order_parser.order_from_json(o) for o in value]


def asset_from_json(raw: Any) -> OpenSeaAsset:
    """Parse an asset record.

    When the record carries `orders` but no explicit buy/sell lists, they
    are split out of `orders` by side.
    """
    context = "asset"
    contract = asset_contract_from_json(require(raw, "asset_contract", context))
    owner = raw.get("owner")

    orders = _orders_or_none(raw, "orders")
    sell_orders = _orders_or_none(raw, "sell_orders")
    buy_orders = _orders_or_none(raw, "buy_orders")
    if orders is not None and sell_orders is None:
        sell_orders = [o for o in orders if o.side == OrderSide.SELL]
    if orders is not None and buy_orders is None:
        buy_orders = [o for o in orders if o.side == OrderSide.BUY]

    background = raw.get("background_color")

    return OpenSeaAsset(
        token_id=str(require(raw, "token_id", context)),
        token_address=contract.address,
        asset_contract=contract,
        name=raw.get("name"),
        description=raw.get("description"),
        owner=account_from_json(owner) if owner else None,
        orders=orders,
        buy_orders=buy_orders,
        sell_orders=sell_orders,
        is_presale=bool(raw.get("is_presale", False)),
        image_url=raw.get("image_url"),
        image_preview_url=raw.get("image_preview_url"),
        image_url_original=raw.get("image_original_url"),
        image_url_thumbnail=raw.get("image_thumbnail_url"),
        opensea_link=raw.get("permalink"),
        external_link=raw.get("external_link"),
        traits=raw.get("traits") or [],
        num_sales=to_int(raw.get("num_sales") or 0, "num_sales"),
        last_sale=raw.get("last_sale"),
        background_color=f"#{background}" if background else None,
    )


def asset_bundle_from_json(raw: Any) -> OpenSeaAssetBundle:
    context = "bundle"
    assets = require(raw, "assets", context)
    if not isinstance(assets, list):
        raise ParseError("bundle: field 'assets' must be a list", field="assets")
    maker = raw.get("maker")

    return OpenSeaAssetBundle(
        maker=account_from_json(maker) if maker else None,
        assets=[asset_from_json(a) for a in assets],
        name=require_str(raw, "name", context),
        slug=require_str(raw, "slug", context),
        permalink=raw.get("permalink") or "",
        sell_orders=_orders_or_none(raw, "sell_orders"),
        description=raw.get("description"),
        external_link=raw.get("external_link"),
    )
