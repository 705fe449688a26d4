"""CLI entry point for querying the OpenSea API."""

import argparse
import asyncio
import logging
import time

import httpx

from opensea_sdk.api.client import OpenSeaAPI
from opensea_sdk.api.errors import OpenSeaAPIError
from opensea_sdk.config.loader import load_config
from opensea_sdk.config.schema import OpenSeaAPIConfig
from opensea_sdk.models.common import OrderSide
from opensea_sdk.models.order import Order
from opensea_sdk.normalize.errors import ParseError
from opensea_sdk.normalize.fields import plain_number
from opensea_sdk.normalize.pricing import estimate_current_price

SIDES = {"buy": OrderSide.BUY, "sell": OrderSide.SELL}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="opensea-sdk",
        description="Query the OpenSea orderbook and asset API",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log requests"
    )

    sub = parser.add_subparsers(dest="command")

    # orders
    orders_p = sub.add_parser("orders", help="List orders")
    orders_p.add_argument("--page", type=int, default=1)
    orders_p.add_argument("--side", choices=sorted(SIDES))
    orders_p.add_argument("--maker", help="Maker address")

    # order
    order_p = sub.add_parser("order", help="Show one order")
    order_p.add_argument("--hash", dest="order_hash", required=True)

    # asset / bundle / tokens
    asset_p = sub.add_parser("asset", help="Show one asset")
    asset_p.add_argument("token_address")
    asset_p.add_argument("token_id")
    bundle_p = sub.add_parser("bundle", help="Show one bundle")
    bundle_p.add_argument("slug")
    tokens_p = sub.add_parser("tokens", help="List payment tokens")
    tokens_p.add_argument("--symbol")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "config":
        return _cmd_config(config, args)

    try:
        return asyncio.run(_dispatch(config, args))
    except (OpenSeaAPIError, ParseError, httpx.RequestError, ValueError) as e:
        print(f"Error: {e}")
        return 1


async def _dispatch(config: OpenSeaAPIConfig, args: argparse.Namespace) -> int:
    async with OpenSeaAPI(config) as api:
        if args.command == "orders":
            return await _cmd_orders(api, args)
        elif args.command == "order":
            return await _cmd_order(api, args)
        elif args.command == "asset":
            return await _cmd_asset(api, args)
        elif args.command == "bundle":
            return await _cmd_bundle(api, args)
        elif args.command == "tokens":
            return await _cmd_tokens(api, args)
    return 1


def _format_order(order: Order, now: int) -> str:
    target = (
        f"bundle {order.metadata.bundle.name or '?'}"
        if order.metadata.bundle is not None
        else f"{order.metadata.asset.address}/{order.metadata.asset.id}"
    )
    price = estimate_current_price(order, now)
    return f"  {order.side.name:<4} {target} price={plain_number(price)} hash={order.hash}"


async def _cmd_orders(api: OpenSeaAPI, args: argparse.Namespace) -> int:
    query: dict = {}
    if args.side:
        query["side"] = SIDES[args.side]
    if args.maker:
        query["maker"] = args.maker
    page = await api.get_orders(query, page=args.page)
    now = int(time.time())
    print(f"Orders: {len(page.orders)} (count {page.count})")
    for order in page.orders:
        print(_format_order(order, now))
    return 0


async def _cmd_order(api: OpenSeaAPI, args: argparse.Namespace) -> int:
    order = await api.get_order({"hash": args.order_hash})
    if order is None:
        print("Order not found")
        return 1
    print(_format_order(order, int(time.time())))
    return 0


async def _cmd_asset(api: OpenSeaAPI, args: argparse.Namespace) -> int:
    asset = await api.get_asset(args.token_address, args.token_id)
    if asset is None:
        print("Asset not found")
        return 1
    owner = asset.owner.address if asset.owner else "unknown"
    print(f"{asset.name} ({asset.token_address}/{asset.token_id}) owner={owner}")
    print(f"Sell orders: {len(asset.sell_orders or [])} | Buy orders: {len(asset.buy_orders or [])}")
    return 0


async def _cmd_bundle(api: OpenSeaAPI, args: argparse.Namespace) -> int:
    bundle = await api.get_bundle(args.slug)
    if bundle is None:
        print("Bundle not found")
        return 1
    print(f"{bundle.name} ({bundle.slug}): {len(bundle.assets)} assets")
    for asset in bundle.assets:
        print(f"  {asset.token_address}/{asset.token_id} {asset.name or ''}")
    return 0


async def _cmd_tokens(api: OpenSeaAPI, args: argparse.Namespace) -> int:
    query = {"symbol": args.symbol} if args.symbol else {}
    tokens = await api.get_tokens(query)
    for token in tokens:
        print(f"  {token.symbol:<8} {token.address} decimals={token.decimals}")
    return 0


def _cmd_config(config: OpenSeaAPIConfig, args: argparse.Namespace) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2, exclude={"api_key"}))
        return 0
    print("Use: config show")
    return 1
