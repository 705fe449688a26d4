"""Tests for asset, bundle, account and token normalization."""

from decimal import Decimal

import pytest

from opensea_sdk.models.common import OrderSide
from opensea_sdk.normalize.asset_parser import (
    account_from_json,
    asset_bundle_from_json,
    asset_contract_from_json,
    asset_from_json,
)
from opensea_sdk.normalize.errors import ParseError
from opensea_sdk.normalize.token_parser import token_from_json


class TestAssetFromJson:
    def test_basic_fields(self, asset_json: dict):
        asset = asset_from_json(asset_json)
        assert asset.token_id == "505"
        assert asset.token_address == "0x06012c8cf97bead5deae237070f9587f8e7a266d"
        assert asset.name == "Kitty #505"
        assert asset.opensea_link.endswith("/505")
        assert asset.image_url_original == "https://img.cryptokitties.co/505.svg"
        assert asset.image_url_thumbnail.endswith("505_thumb.png")
        assert asset.num_sales == 3
        assert asset.traits[0]["value"] == "cymric"
        assert asset.owner is not None
        assert asset.owner.username == "alice"

    def test_background_color_prefixed(self, asset_json: dict):
        assert asset_from_json(asset_json).background_color == "#cddc39"
        asset_json["background_color"] = None
        assert asset_from_json(asset_json).background_color is None

    def test_orders_split_by_side(self, asset_json: dict):
        asset = asset_from_json(asset_json)
        assert len(asset.orders) == 2
        assert [o.side for o in asset.sell_orders] == [OrderSide.SELL]
        assert [o.side for o in asset.buy_orders] == [OrderSide.BUY]

    def test_explicit_sell_orders_kept(self, asset_json: dict):
        asset_json["sell_orders"] = []
        asset = asset_from_json(asset_json)
        assert asset.sell_orders == []
        assert len(asset.buy_orders) == 1

    def test_no_orders(self, asset_json: dict):
        del asset_json["orders"]
        asset = asset_from_json(asset_json)
        assert asset.orders is None
        assert asset.sell_orders is None
        assert asset.buy_orders is None

    def test_missing_contract(self, asset_json: dict):
        del asset_json["asset_contract"]
        with pytest.raises(ParseError, match="asset_contract"):
            asset_from_json(asset_json)

    def test_missing_token_id(self, asset_json: dict):
        del asset_json["token_id"]
        with pytest.raises(ParseError, match="token_id"):
            asset_from_json(asset_json)

    def test_bad_nested_order_fails_whole_asset(self, asset_json: dict):
        del asset_json["orders"][0]["metadata"]["schema"]
        with pytest.raises(ParseError):
            asset_from_json(asset_json)


class TestAssetContractFromJson:
    def test_fee_basis_points(self, asset_json: dict):
        contract = asset_contract_from_json(asset_json["asset_contract"])
        assert contract.seller_fee_basis_points == 250
        assert contract.opensea_seller_fee_basis_points == 250
        assert contract.dev_seller_fee_basis_points == 0
        assert contract.token_symbol == "CK"
        assert contract.wiki_link is not None

    def test_string_basis_points(self, asset_json: dict):
        raw = asset_json["asset_contract"]
        raw["seller_fee_basis_points"] = "375"
        assert asset_contract_from_json(raw).seller_fee_basis_points == 375


class TestAccountFromJson:
    def test_without_user(self):
        account = account_from_json({"address": "0xabc", "user": None})
        assert account.address == "0xabc"
        assert account.username is None
        assert account.config == ""

    def test_missing_address(self):
        with pytest.raises(ParseError, match="address"):
            account_from_json({"config": ""})


class TestAssetBundleFromJson:
    def test_bundle(self, bundle_json: dict):
        bundle = asset_bundle_from_json(bundle_json)
        assert bundle.slug == "kitty-pair"
        assert bundle.name == "Kitty pair"
        assert len(bundle.assets) == 1
        assert bundle.assets[0].token_id == "505"
        assert len(bundle.sell_orders) == 1
        assert bundle.maker is not None
        assert bundle.external_link is None

    def test_sell_orders_absent(self, bundle_json: dict):
        del bundle_json["sell_orders"]
        assert asset_bundle_from_json(bundle_json).sell_orders is None

    def test_missing_slug(self, bundle_json: dict):
        del bundle_json["slug"]
        with pytest.raises(ParseError, match="slug"):
            asset_bundle_from_json(bundle_json)


class TestTokenFromJson:
    def test_token(self, tokens_json: list[dict]):
        token = token_from_json(tokens_json[0])
        assert token.symbol == "WETH"
        assert token.decimals == 18
        assert token.eth_price == Decimal("1.000000000000000")

    def test_float_price_not_widened(self, tokens_json: list[dict]):
        token = token_from_json(tokens_json[1])
        assert token.eth_price == Decimal("0.0054")
        assert token.image_url is None

    def test_missing_symbol(self, tokens_json: list[dict]):
        del tokens_json[0]["symbol"]
        with pytest.raises(ParseError, match="symbol"):
            token_from_json(tokens_json[0])
