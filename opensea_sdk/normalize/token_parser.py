"""Normalize fungible token records from the tokens endpoint."""

from typing import Any

from opensea_sdk.models.token import FungibleToken
from opensea_sdk.normalize.fields import require, require_str, to_decimal, to_int


def token_from_json(raw: Any) -> FungibleToken:
    context = "token"
    eth_price = raw.get("eth_price") if isinstance(raw, dict) else None
    return FungibleToken(
        name=require_str(raw, "name", context),
        symbol=require_str(raw, "symbol", context),
        decimals=to_int(require(raw, "decimals", context), "decimals"),
        address=require_str(raw, "address", context),
        image_url=raw.get("image_url"),
        eth_price=to_decimal(eth_price, "eth_price") if eth_price is not None else None,
    )
