"""Normalize orderbook order records into Order models.

The orderbook returns snake_case records where the maker, taker and fee
recipient are account objects. The Wyvern order fields keep plain
addresses; the account objects are kept alongside.
"""

from decimal import Decimal
from typing import Any

from opensea_sdk.models.common import (
    NULL_ADDRESS,
    FeeMethod,
    HowToCall,
    OrderSide,
    SaleKind,
    WyvernSchemaName,
)
from opensea_sdk.models.order import Order, OrderMetadata, WyvernAsset, WyvernBundle
from opensea_sdk.normalize import asset_parser
from opensea_sdk.normalize.errors import ParseError
from opensea_sdk.normalize.fields import (
    require,
    require_str,
    to_decimal,
    to_enum,
    to_epoch_seconds,
    to_int,
)
from opensea_sdk.normalize.token_parser import token_from_json


def _wyvern_asset(raw: Any) -> WyvernAsset:
    return WyvernAsset(
        id=str(require(raw, "id", "metadata.asset")),
        address=require_str(raw, "address", "metadata.asset"),
    )


def metadata_from_json(raw: Any) -> OrderMetadata:
    """Parse the order metadata block.

    A single-asset order has an `asset` key, a bundle order a `bundle` key.
    """
    context = "metadata"
    schema_name = require(raw, "schema", context)
    try:
        schema = WyvernSchemaName(schema_name)
    except ValueError as e:
        raise ParseError(
            f"{context}: unknown schema {schema_name!r}", field="schema"
        ) from e

    if raw.get("asset") is not None:
        return OrderMetadata(schema=schema, asset=_wyvern_asset(raw["asset"]))

    if raw.get("bundle") is not None:
        bundle = raw["bundle"]
        assets = require(bundle, "assets", "metadata.bundle")
        if not isinstance(assets, list):
            raise ParseError("metadata.bundle: 'assets' must be a list", field="assets")
        return OrderMetadata(
            schema=schema,
            bundle=WyvernBundle(
                assets=[_wyvern_asset(a) for a in assets],
                name=bundle.get("name"),
                description=bundle.get("description"),
                external_link=bundle.get("external_link"),
            ),
        )

    raise ParseError(f"{context}: neither 'asset' nor 'bundle' present")


def order_from_json(raw: Any) -> Order:
    context = "order"
    maker = asset_parser.account_from_json(require(raw, "maker", context))
    taker = asset_parser.account_from_json(require(raw, "taker", context))
    fee_recipient = asset_parser.account_from_json(
        require(raw, "fee_recipient", context)
    )

    order_hash = raw.get("order_hash") or raw.get("hash")
    if not order_hash:
        raise ParseError(f"{context}: missing required field 'order_hash'", field="order_hash")

    def dec(key: str) -> Decimal:
        return to_decimal(require(raw, key, context), key)

    def optional_dec(key: str) -> Decimal:
        return to_decimal(raw.get(key) or 0, key)

    created_date = raw.get("created_date")
    token_contract = raw.get("payment_token_contract")
    asset = raw.get("asset")
    bundle = raw.get("asset_bundle")

    return Order(
        exchange=require_str(raw, "exchange", context),
        maker=maker.address,
        taker=taker.address,
        maker_relayer_fee=dec("maker_relayer_fee"),
        taker_relayer_fee=dec("taker_relayer_fee"),
        maker_protocol_fee=dec("maker_protocol_fee"),
        taker_protocol_fee=dec("taker_protocol_fee"),
        maker_referrer_fee=optional_dec("maker_referrer_fee"),
        fee_recipient=fee_recipient.address,
        fee_method=to_enum(FeeMethod, require(raw, "fee_method", context), "fee_method"),
        side=to_enum(OrderSide, require(raw, "side", context), "side"),
        sale_kind=to_enum(SaleKind, require(raw, "sale_kind", context), "sale_kind"),
        target=require_str(raw, "target", context),
        how_to_call=to_enum(
            HowToCall, require(raw, "how_to_call", context), "how_to_call"
        ),
        calldata=require_str(raw, "calldata", context),
        replacement_pattern=require_str(raw, "replacement_pattern", context),
        static_target=require_str(raw, "static_target", context),
        static_extradata=require_str(raw, "static_extradata", context),
        payment_token=require_str(raw, "payment_token", context),
        base_price=dec("base_price"),
        extra=dec("extra"),
        listing_time=to_int(require(raw, "listing_time", context), "listing_time"),
        expiration_time=to_int(
            require(raw, "expiration_time", context), "expiration_time"
        ),
        salt=to_int(require(raw, "salt", context), "salt"),
        metadata=metadata_from_json(require(raw, "metadata", context)),
        waiting_for_best_counter_order=fee_recipient.address == NULL_ADDRESS,
        hash=order_hash,
        v=to_int(require(raw, "v", context), "v"),
        r=require_str(raw, "r", context),
        s=require_str(raw, "s", context),
        current_price=optional_dec("current_price"),
        current_bounty=optional_dec("current_bounty"),
        created_time=(
            to_epoch_seconds(created_date, "created_date") if created_date else None
        ),
        maker_account=maker,
        taker_account=taker,
        fee_recipient_account=fee_recipient,
        payment_token_contract=(
            token_from_json(token_contract) if token_contract else None
        ),
        cancelled_or_finalized=bool(raw.get("cancelled") or raw.get("finalized")),
        marked_invalid=bool(raw.get("marked_invalid", False)),
        asset=asset_parser.asset_from_json(asset) if asset else None,
        asset_bundle=asset_parser.asset_bundle_from_json(bundle) if bundle else None,
    )
