"""Serialize orders back into the camelCase OrderJSON form the orderbook accepts."""

from typing import Any

from opensea_sdk.models.order import (
    Order,
    OrderMetadata,
    UnhashedOrder,
    UnsignedOrder,
    WyvernAsset,
)
from opensea_sdk.normalize.fields import plain_number


def _asset_to_json(asset: WyvernAsset) -> dict[str, str]:
    return {"id": asset.id, "address": asset.address}


def metadata_to_json(metadata: OrderMetadata) -> dict[str, Any]:
    data: dict[str, Any] = {"schema": str(metadata.schema)}
    if metadata.asset is not None:
        data["asset"] = _asset_to_json(metadata.asset)
    if metadata.bundle is not None:
        bundle: dict[str, Any] = {
            "assets": [_asset_to_json(a) for a in metadata.bundle.assets],
        }
        for key in ("name", "description", "external_link"):
            value = getattr(metadata.bundle, key)
            if value is not None:
                bundle[key] = value
        data["bundle"] = bundle
    return data


def order_to_json(order: UnhashedOrder) -> dict[str, Any]:
    """Convert an order to OrderJSON.

    Addresses are lowercased. Numeric fields are written as plain digit
    strings so Decimal and int values keep their exact value.
    """
    data: dict[str, Any] = {
        "exchange": order.exchange.lower(),
        "maker": order.maker.lower(),
        "taker": order.taker.lower(),
        "makerRelayerFee": plain_number(order.maker_relayer_fee),
        "takerRelayerFee": plain_number(order.taker_relayer_fee),
        "makerProtocolFee": plain_number(order.maker_protocol_fee),
        "takerProtocolFee": plain_number(order.taker_protocol_fee),
        "makerReferrerFee": plain_number(order.maker_referrer_fee),
        "feeMethod": int(order.fee_method),
        "feeRecipient": order.fee_recipient.lower(),
        "side": int(order.side),
        "saleKind": int(order.sale_kind),
        "target": order.target.lower(),
        "howToCall": int(order.how_to_call),
        "calldata": order.calldata,
        "replacementPattern": order.replacement_pattern,
        "staticTarget": order.static_target.lower(),
        "staticExtradata": order.static_extradata,
        "paymentToken": order.payment_token.lower(),
        "basePrice": plain_number(order.base_price),
        "extra": plain_number(order.extra),
        "listingTime": plain_number(order.listing_time),
        "expirationTime": plain_number(order.expiration_time),
        "salt": plain_number(order.salt),
        "metadata": metadata_to_json(order.metadata),
    }
    if isinstance(order, UnsignedOrder):
        data["hash"] = order.hash
    if isinstance(order, Order):
        data["v"] = order.v
        data["r"] = order.r
        data["s"] = order.s
    return data
