#!/usr/bin/env python3
"""
Jupiter Arbitrage Bot

Quotes TOKEN → TOKEN round trips on Jupiter and executes the best route
whenever it returns at least DESIRED_PROFIT.

Usage:
    python main.py <TOKEN> <AMOUNT> <SLIPPAGE> <DESIRED_PROFIT>

The wallet secret (base58) is read from WALLET_PRIVATE_KEY, optionally via .env.
"""

import argparse
import asyncio
import contextlib
import logging
import os
import signal
import sys
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from dotenv import load_dotenv

from config import Settings
from jupiter_arb import ArbBotError, ArbitrageLoop, TradeConfig
from jupiter_arb.blockchain import SolanaLedgerClient, Wallet
from jupiter_arb.execution import ExecutionPolicy, TransactionExecutor
from jupiter_arb.jupiter import JupiterClient, QuoteClient, TransactionBuilder
from jupiter_arb.tokens import load_catalog, resolve_token

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _decimal(value: str) -> str:
    try:
        number = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not number.is_finite():
        raise argparse.ArgumentTypeError(f"not a finite number: {value!r}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="main.py",
        description="Jupiter token → token arbitrage bot",
    )
    parser.add_argument("token", help="Token symbol, e.g. USDC")
    parser.add_argument("amount", type=_decimal, help="Trade amount in token units")
    parser.add_argument("slippage", type=_decimal, help="Slippage tolerance passed to the quote API")
    parser.add_argument("desired_profit", type=_decimal, help="Minimum profit in token units")
    return parser.parse_args(argv)


def _install_signal_handlers(stop: asyncio.Event):
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        # Not available on Windows event loops
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop.set)


async def run_bot(args: argparse.Namespace, settings: Settings) -> int:
    """Startup (fatal errors raise) followed by the arbitrage loop."""
    wallet = Wallet.from_base58(os.environ.get("WALLET_PRIVATE_KEY", ""))
    policy = ExecutionPolicy.parse(settings.execution_policy)

    catalog = await load_catalog(
        settings.cluster,
        url=settings.token_list_url,
        path=settings.token_list_path,
    )
    token = resolve_token(catalog, args.token)
    trade = TradeConfig.create(token, args.amount, args.slippage, args.desired_profit)

    logger.info(f"Wallet: {wallet.public_key}")
    logger.info(f"Execution policy: {policy.value}")

    ledger = SolanaLedgerClient(
        url=settings.rpc_url,
        commitment=settings.commitment,
        confirm_commitment=settings.confirm_commitment,
        timeout=settings.http_timeout,
    )
    async with ledger, JupiterClient(timeout=settings.http_timeout) as http:
        executor = TransactionExecutor(
            ledger,
            wallet,
            policy=policy,
            max_attempts=settings.confirm_max_attempts,
            min_timeout=settings.confirm_min_timeout,
            max_timeout=settings.confirm_max_timeout,
            backoff_factor=settings.confirm_backoff_factor,
            explorer_tx_url=settings.explorer_tx_url,
        )
        bot = ArbitrageLoop(
            trade,
            wallet,
            QuoteClient(http, settings.quote_api_url),
            TransactionBuilder(http, settings.swap_api_url),
            executor,
            interval=settings.loop_interval,
        )
        stop = asyncio.Event()
        _install_signal_handlers(stop)
        await bot.run(stop_event=stop)
        logger.info(f"Stats: {bot.stats}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    load_dotenv()

    try:
        settings = Settings.from_env()
        logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        return asyncio.run(run_bot(args, settings))
    except (ArbBotError, ValueError) as e:
        logger.error(f"Startup failed: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
