"""Payment token models."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FungibleToken:
    name: str
    symbol: str
    decimals: int
    address: str
    image_url: str | None = None
    eth_price: Decimal | None = None
