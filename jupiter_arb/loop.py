"""Quote → evaluate → build → execute, forever."""

import asyncio
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .blockchain.wallet import Wallet
from .execution.confirmation import ConfirmationStatus
from .execution.executor import ExecutionReport, TransactionExecutor
from .jupiter.quotes import QuoteClient
from .jupiter.swaps import TransactionBuilder
from .profit import is_profitable, profit
from .types import Token
from .units import to_base_units, to_human_units

logger = logging.getLogger(__name__)

_STAT_KEYS = {
    ConfirmationStatus.SUCCESS: "transactions_confirmed",
    ConfirmationStatus.FAILED: "transactions_failed",
    ConfirmationStatus.TIMED_OUT: "transactions_timed_out",
}


@dataclass(frozen=True)
class TradeConfig:
    """Fixed trade parameters, built once at startup."""
    token: Token
    amount: Decimal          # human units
    base_amount: int         # amount in base units
    slippage: str            # passed through to the quote service
    desired_profit: Decimal  # human units

    @classmethod
    def create(
        cls,
        token: Token,
        amount: Union[Decimal, str, int],
        slippage: Union[Decimal, str, int],
        desired_profit: Union[Decimal, str, int],
    ) -> "TradeConfig":
        try:
            numbers = [Decimal(str(v)) for v in (amount, slippage, desired_profit)]
        except InvalidOperation:
            raise ValueError(f"Invalid trade parameters: {amount}, {slippage}, {desired_profit}")
        if not all(n.is_finite() for n in numbers):
            raise ValueError(f"Trade parameters must be finite: {amount}, {slippage}, {desired_profit}")
        amount, _, desired_profit = numbers
        return cls(
            token=token,
            amount=amount,
            base_amount=to_base_units(token, amount),
            slippage=str(slippage),
            desired_profit=desired_profit,
        )


@dataclass
class IterationResult:
    output_amount: Decimal
    profitable: bool
    report: Optional[ExecutionReport] = None


class ArbitrageLoop:
    """
    Runs the arbitrage cycle until cancelled or stopped.

    Errors inside an iteration are discarded and the next iteration starts
    right away. asyncio.CancelledError is never swallowed.
    """

    def __init__(
        self,
        trade: TradeConfig,
        wallet: Wallet,
        quotes: QuoteClient,
        builder: TransactionBuilder,
        executor: TransactionExecutor,
        interval: float = 0.0,
    ):
        self.trade = trade
        self.wallet = wallet
        self.quotes = quotes
        self.builder = builder
        self.executor = executor
        self.interval = interval
        self.stats = {
            "iterations": 0,
            "errors": 0,
            "profitable": 0,
            "transactions_confirmed": 0,
            "transactions_failed": 0,
            "transactions_timed_out": 0,
        }

    async def run_once(self) -> IterationResult:
        trade = self.trade
        quote = await self.quotes.best_route(trade.token, trade.base_amount, trade.slippage)
        output = to_human_units(trade.token, quote.out_amount_with_slippage)

        if not is_profitable(trade.amount, output, trade.desired_profit):
            logger.debug(f"{trade.amount} → {output} {trade.token.symbol} ({profit(trade.amount, output):+}), skipping")
            return IterationResult(output_amount=output, profitable=False)

        logger.info(f"Profitable route: {trade.amount} → {output} {trade.token.symbol} ({profit(trade.amount, output):+})")
        self.stats["profitable"] += 1
        tx_set = await self.builder.build(quote, self.wallet.public_key)
        report = await self.executor.execute(tx_set)
        self._record(report)
        return IterationResult(output_amount=output, profitable=True, report=report)

    def _record(self, report: ExecutionReport):
        for _, result in report.results:
            self.stats[_STAT_KEYS[result.status]] += 1

    async def run(self, stop_event: Optional[asyncio.Event] = None, max_iterations: Optional[int] = None):
        """
        Loop until `stop_event` is set or the task is cancelled.

        Args:
            stop_event: checked between iterations for a graceful stop
            max_iterations: bound on iterations (None = infinite)
        """
        logger.info(
            f"Starting loop: {self.trade.amount} {self.trade.token.symbol} "
            f"({self.trade.base_amount} base units), slippage {self.trade.slippage}, "
            f"desired profit {self.trade.desired_profit}"
        )
        while not (stop_event and stop_event.is_set()):
            if max_iterations is not None and self.stats["iterations"] >= max_iterations:
                break
            self.stats["iterations"] += 1
            try:
                await self.run_once()
            except Exception as e:
                self.stats["errors"] += 1
                logger.debug(f"Iteration {self.stats['iterations']} failed: {type(e).__name__}: {e}")
            # Yield point; no backoff when interval is 0
            await asyncio.sleep(self.interval)
        logger.info(f"Loop stopped after {self.stats['iterations']} iterations")
