"""Tests for serializing orders back to the OrderJSON wire form."""

import dataclasses
from decimal import Decimal

import pytest

from opensea_sdk.models.order import UnhashedOrder
from opensea_sdk.normalize.order_parser import order_from_json
from opensea_sdk.normalize.order_serializer import order_to_json

# OrderJSON key -> orderbook record key
NUMERIC_FIELDS = {
    "makerRelayerFee": "maker_relayer_fee",
    "takerRelayerFee": "taker_relayer_fee",
    "makerProtocolFee": "maker_protocol_fee",
    "takerProtocolFee": "taker_protocol_fee",
    "basePrice": "base_price",
    "extra": "extra",
    "salt": "salt",
}


class TestOrderToJson:
    def test_numeric_strings_survive(self, order_json: dict, bundle_order_json: dict):
        for raw in (order_json, bundle_order_json):
            wire = order_to_json(order_from_json(raw))
            for wire_key, raw_key in NUMERIC_FIELDS.items():
                assert wire[wire_key] == raw[raw_key], wire_key

    def test_timestamps_as_strings(self, order_json: dict, bundle_order_json: dict):
        wire = order_to_json(order_from_json(order_json))
        assert wire["listingTime"] == "1541627544"
        assert wire["expirationTime"] == "0"
        wire = order_to_json(order_from_json(bundle_order_json))
        assert wire["expirationTime"] == bundle_order_json["expiration_time"]

    def test_enums_as_wire_integers(self, order_json: dict):
        wire = order_to_json(order_from_json(order_json))
        assert wire["side"] == 1
        assert wire["feeMethod"] == 1
        assert wire["saleKind"] == 0
        assert wire["howToCall"] == 0
        assert type(wire["side"]) is int

    def test_signature_and_hash(self, order_json: dict):
        wire = order_to_json(order_from_json(order_json))
        assert wire["hash"] == order_json["order_hash"]
        assert wire["v"] == 27
        assert wire["r"] == order_json["r"]

    def test_metadata(self, order_json: dict, bundle_order_json: dict):
        wire = order_to_json(order_from_json(order_json))
        assert wire["metadata"] == order_json["metadata"]
        wire = order_to_json(order_from_json(bundle_order_json))
        assert wire["metadata"] == bundle_order_json["metadata"]

    def test_addresses_lowercased(self, order_json: dict):
        order_json["exchange"] = order_json["exchange"].upper().replace("0X", "0x")
        wire = order_to_json(order_from_json(order_json))
        assert wire["exchange"] == "0x5206e78b21ce315ce284fb24cf05e0585a93b1d9"

    def test_unhashed_order_has_no_signature(self, order_json: dict):
        order = order_from_json(order_json)
        fields = {f.name for f in dataclasses.fields(UnhashedOrder)}
        unhashed = UnhashedOrder(**{name: getattr(order, name) for name in fields})
        wire = order_to_json(unhashed)
        assert "hash" not in wire
        assert "v" not in wire
        assert "r" not in wire


class TestPlainDigits:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1e18", "1000000000000000000"),
            ("2.5E+3", "2500"),
            (1e18, "1000000000000000000"),
            (0.0025, "0.0025"),
            ("123456789012345678901234567890123456789", "123456789012345678901234567890123456789"),
        ],
    )
    def test_base_price_written_without_exponent(self, order_json: dict, raw, expected):
        order_json["base_price"] = raw
        wire = order_to_json(order_from_json(order_json))
        assert wire["basePrice"] == expected

    def test_exponent_decimal_on_model(self, order_json: dict):
        order = dataclasses.replace(
            order_from_json(order_json),
            base_price=Decimal("1E+18"),
            maker_relayer_fee=Decimal("2.5E+2"),
        )
        wire = order_to_json(order)
        assert wire["basePrice"] == "1000000000000000000"
        assert wire["makerRelayerFee"] == "250"

    def test_reparsed_wire_value_is_equal(self, order_json: dict):
        order_json["extra"] = "5E+17"
        order = order_from_json(order_json)
        wire = order_to_json(order)
        assert wire["extra"] == "500000000000000000"
        assert Decimal(wire["extra"]) == order.extra
