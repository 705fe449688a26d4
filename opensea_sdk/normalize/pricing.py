"""Client-side current price estimation, including the buyer fee."""

from decimal import ROUND_CEILING, Decimal

from opensea_sdk.models.common import OrderSide, SaleKind
from opensea_sdk.models.order import UnhashedOrder

INVERSE_BASIS_POINT = Decimal(10000)


def estimate_current_price(
    order: UnhashedOrder,
    now: int,
    seconds_to_backlog: int = 30,
    round_up: bool = True,
) -> Decimal:
    """Estimate what a taker would pay for `order` at unix time `now`.

    `seconds_to_backlog` shifts `now` into the past to absorb latency
    between estimation and matching on chain.
    """
    at = Decimal(now - seconds_to_backlog)
    price = order.base_price

    if order.sale_kind == SaleKind.DUTCH_AUCTION:
        duration = Decimal(order.expiration_time - order.listing_time)
        if duration > 0:
            elapsed = min(max(at - order.listing_time, Decimal(0)), duration)
            diff = order.extra * elapsed / duration
            # Sell side walks down from base price, buy side walks up
            price = price - diff if order.side == OrderSide.SELL else price + diff

    if order.side == OrderSide.SELL and not order.waiting_for_best_counter_order:
        price = price * (order.taker_relayer_fee / INVERSE_BASIS_POINT + 1)

    if round_up:
        return price.to_integral_value(rounding=ROUND_CEILING)
    return price
