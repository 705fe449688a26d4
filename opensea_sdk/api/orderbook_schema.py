"""Decoding strategies for the two orderbook list response shapes.

Version 0 of the orderbook returns a bare array of orders. Later versions
return `{"orders": [...], "count": N}` where `count` is the total across
all pages. The strategy is picked once from the configured version, never
by inspecting a payload.
"""

from abc import ABC, abstractmethod
from typing import Any

from opensea_sdk.models.order import Order, OrderPage
from opensea_sdk.normalize.errors import ParseError
from opensea_sdk.normalize.order_parser import order_from_json

LEGACY_ORDERBOOK_VERSION = 0


class OrderbookSchema(ABC):
    @abstractmethod
    def order_records(self, payload: Any) -> list[Any]:
        """Return the raw order records in `payload`."""

    @abstractmethod
    def total_count(self, payload: Any, records: list[Any]) -> int:
        """Return the order count reported for `payload`."""

    def decode_page(self, payload: Any) -> OrderPage:
        records = self.order_records(payload)
        return OrderPage(
            orders=[order_from_json(r) for r in records],
            count=self.total_count(payload, records),
        )

    def decode_first(self, payload: Any) -> Order | None:
        records = self.order_records(payload)
        return order_from_json(records[0]) if records else None


class LegacyOrderbookSchema(OrderbookSchema):
    """Bare array. The count is only what this page holds."""

    def order_records(self, payload: Any) -> list[Any]:
        if not isinstance(payload, list):
            raise ParseError(
                f"legacy orderbook response must be a list, got {type(payload).__name__}"
            )
        return payload

    def total_count(self, payload: Any, records: list[Any]) -> int:
        return len(records)


class VersionedOrderbookSchema(OrderbookSchema):
    def order_records(self, payload: Any) -> list[Any]:
        if not isinstance(payload, dict) or not isinstance(payload.get("orders"), list):
            raise ParseError("orderbook response must be an object with an 'orders' list")
        return payload["orders"]

    def total_count(self, payload: Any, records: list[Any]) -> int:
        count = payload.get("count")
        if isinstance(count, bool) or not isinstance(count, int):
            raise ParseError("orderbook response 'count' must be an integer", field="count")
        return count


def schema_for_version(version: int) -> OrderbookSchema:
    # Any non-legacy version is assumed to keep the {orders, count} shape;
    # a new shape needs its own strategy here.
    if version == LEGACY_ORDERBOOK_VERSION:
        return LegacyOrderbookSchema()
    return VersionedOrderbookSchema()
