"""Tests for query parameter serialization."""

from decimal import Decimal

from opensea_sdk.api.transport import build_query
from opensea_sdk.models.common import OrderSide


class TestBuildQuery:
    def test_sorted_and_none_dropped(self):
        assert build_query({"b": 2, "a": "x", "c": None}) == [("a", "x"), ("b", "2")]

    def test_sequences_repeat(self):
        assert build_query({"token_ids": [1, "2"]}) == [
            ("token_ids", "1"),
            ("token_ids", "2"),
        ]

    def test_booleans(self):
        assert build_query({"bundled": True, "on_sale": False}) == [
            ("bundled", "true"),
            ("on_sale", "false"),
        ]

    def test_decimals_in_plain_digits(self):
        assert build_query({"min_price": Decimal("1E+18")}) == [
            ("min_price", "1000000000000000000")
        ]

    def test_enums_use_wire_value(self):
        assert build_query({"side": OrderSide.BUY}) == [("side", "0")]

    def test_empty(self):
        assert build_query({}) == []
