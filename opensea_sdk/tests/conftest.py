"""Shared test fixtures."""

import copy
import json
from pathlib import Path

import pytest

from opensea_sdk.config.schema import OpenSeaAPIConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-api.example.com"


def load_fixture(name: str):
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def order_json() -> dict:
    """A signed fixed-price sell order for a single asset."""
    return load_fixture("order_sell_asset.json")


@pytest.fixture
def bundle_order_json() -> dict:
    """A signed Dutch-auction buy order for a bundle."""
    return load_fixture("order_buy_bundle.json")


@pytest.fixture
def asset_json(order_json: dict) -> dict:
    data = load_fixture("asset.json")
    buy = copy.deepcopy(order_json)
    buy["side"] = 0
    data["orders"] = [order_json, buy]
    return data


@pytest.fixture
def bundle_json(order_json: dict) -> dict:
    data = load_fixture("bundle.json")
    data["assets"] = [load_fixture("asset.json")]
    data["sell_orders"] = [order_json]
    return data


@pytest.fixture
def tokens_json() -> list[dict]:
    return load_fixture("tokens.json")


@pytest.fixture
def test_config() -> OpenSeaAPIConfig:
    return OpenSeaAPIConfig(api_base_url=TEST_BASE_URL)
