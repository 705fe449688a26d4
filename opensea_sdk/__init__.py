"""Async client for the OpenSea orderbook and asset API."""

import logging

from opensea_sdk.api.client import OpenSeaAPI
from opensea_sdk.api.errors import ErrorKind, OpenSeaAPIError
from opensea_sdk.config.schema import OpenSeaAPIConfig
from opensea_sdk.models.common import (
    FeeMethod,
    HowToCall,
    Network,
    OrderSide,
    SaleKind,
    WyvernSchemaName,
)
from opensea_sdk.normalize.errors import ParseError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ErrorKind",
    "FeeMethod",
    "HowToCall",
    "Network",
    "OpenSeaAPI",
    "OpenSeaAPIConfig",
    "OpenSeaAPIError",
    "OrderSide",
    "ParseError",
    "SaleKind",
    "WyvernSchemaName",
]
