"""
Tests for loop.py

Covers:
  - TradeConfig conversion to base units
  - Profitable scenario: build + execute three transactions
  - Unprofitable scenario: builder/executor never invoked
  - Quote outage: loop keeps running, never raises
  - Graceful stop and task cancellation
"""

import asyncio
import logging
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from solders.pubkey import Pubkey

from jupiter_arb import ArbitrageLoop, TradeConfig
from jupiter_arb.execution import TransactionExecutor
from jupiter_arb.jupiter import JupiterClient, JupiterError, QuoteClient, TransactionBuilder

from .fakes import FakeLedger, make_payload


def _route(out_with_slippage: int) -> dict:
    return {
        "inAmount": 100_000_000,
        "outAmount": out_with_slippage,
        "outAmountWithSlippage": out_with_slippage,
        "marketInfos": [],
    }


@pytest.fixture
def trade(usdc) -> TradeConfig:
    return TradeConfig.create(usdc, "100", "50", "0.5")


@pytest.fixture
def ledger() -> FakeLedger:
    return FakeLedger()


@pytest.fixture
def http(keypair):
    http = MagicMock(spec=JupiterClient)
    http.get_json = AsyncMock(return_value={"data": [_route(100_600_000)]})
    http.post_json = AsyncMock(return_value={
        "setupTransaction": make_payload(keypair, Pubkey.new_unique()),
        "swapTransaction": make_payload(keypair, Pubkey.new_unique()),
        "cleanupTransaction": make_payload(keypair, Pubkey.new_unique()),
    })
    return http


@pytest.fixture
def bot(trade, wallet, http, ledger, no_sleep) -> ArbitrageLoop:
    return ArbitrageLoop(
        trade,
        wallet,
        QuoteClient(http, "https://quote"),
        TransactionBuilder(http, "https://swap"),
        TransactionExecutor(ledger, wallet, sleep=no_sleep),
    )


class TestTradeConfig:

    def test_converts_once(self, trade):
        assert trade.amount == Decimal("100")
        assert trade.base_amount == 100_000_000
        assert trade.slippage == "50"
        assert trade.desired_profit == Decimal("0.5")

    def test_rejects_non_numeric(self, usdc):
        with pytest.raises(ValueError):
            TradeConfig.create(usdc, "lots", "50", "0.5")

    def test_rejects_negative_amount(self, usdc):
        with pytest.raises(ValueError):
            TradeConfig.create(usdc, "-1", "50", "0.5")

    @pytest.mark.parametrize("amount, slippage, profit", [
        ("NaN", "50", "0.5"),
        ("Infinity", "50", "0.5"),
        ("100", "50", "NaN"),
        ("100", "sNaN", "0.5"),
    ])
    def test_rejects_non_finite(self, usdc, amount, slippage, profit):
        with pytest.raises(ValueError):
            TradeConfig.create(usdc, amount, slippage, profit)


class TestRunOnce:

    @pytest.mark.asyncio
    async def test_profitable_route_is_executed(self, bot, http, ledger, wallet, caplog):
        with caplog.at_level(logging.INFO):
            result = await bot.run_once()

        assert result.profitable
        assert result.output_amount == Decimal("100.6")
        http.get_json.assert_awaited_once()
        assert http.get_json.call_args.kwargs["params"]["amount"] == "100000000"
        assert http.post_json.call_args.args[1]["userPublicKey"] == wallet.public_key
        assert len(ledger.sent) == 3
        assert result.report.all_succeeded
        for sig in ("sig1", "sig2", "sig3"):
            assert f"Transaction successful: https://solscan.io/tx/{sig}" in caplog.text
        assert bot.stats["transactions_confirmed"] == 3

    @pytest.mark.asyncio
    async def test_unprofitable_route_is_skipped(self, bot, http, ledger):
        http.get_json.return_value = {"data": [_route(100_200_000)]}

        result = await bot.run_once()

        assert not result.profitable
        assert result.output_amount == Decimal("100.2")
        http.post_json.assert_not_awaited()
        assert ledger.sent == []

    @pytest.mark.asyncio
    async def test_exact_threshold_is_profitable(self, bot, http):
        http.get_json.return_value = {"data": [_route(100_500_000)]}
        assert (await bot.run_once()).profitable

    @pytest.mark.asyncio
    async def test_uses_top_ranked_route(self, bot, http):
        http.get_json.return_value = {"data": [_route(100_200_000), _route(105_000_000)]}
        assert not (await bot.run_once()).profitable

    @pytest.mark.asyncio
    async def test_failed_confirmations_are_counted(self, bot, ledger):
        ledger.plans = [(0, {"InstructionError": [0, "InvalidAccountData"]}), None]
        bot.executor.max_attempts = 2

        result = await bot.run_once()

        assert len(ledger.sent) == 3
        assert bot.stats["transactions_failed"] == 1
        assert bot.stats["transactions_timed_out"] == 1
        assert bot.stats["transactions_confirmed"] == 1
        assert not result.report.all_succeeded


class TestRun:

    @pytest.mark.asyncio
    async def test_quote_outage_never_escapes(self, bot, http):
        http.get_json.side_effect = JupiterError("GET failed: connection refused")

        await bot.run(max_iterations=100)

        assert bot.stats["iterations"] == 100
        assert bot.stats["errors"] == 100
        http.post_json.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unexpected_errors_are_discarded(self, bot, http):
        http.post_json.side_effect = RuntimeError("boom")

        await bot.run(max_iterations=3)

        assert bot.stats["errors"] == 3
        assert bot.stats["profitable"] == 3

    @pytest.mark.asyncio
    async def test_runs_until_stopped(self, bot, http):
        http.get_json.side_effect = JupiterError("down")
        stop = asyncio.Event()

        task = asyncio.create_task(bot.run(stop_event=stop))
        await asyncio.sleep(0.05)
        assert not task.done()
        assert bot.stats["iterations"] > 1

        stop.set()
        await asyncio.wait_for(task, timeout=1.0)
        assert task.exception() is None

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, bot, http):
        http.get_json.side_effect = JupiterError("down")

        task = asyncio.create_task(bot.run())
        await asyncio.sleep(0.01)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

    @pytest.mark.asyncio
    async def test_stop_before_start(self, bot, http):
        stop = asyncio.Event()
        stop.set()
        await bot.run(stop_event=stop)
        assert bot.stats["iterations"] == 0
        http.get_json.assert_not_awaited()
