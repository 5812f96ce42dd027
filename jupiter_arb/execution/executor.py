"""Sign, submit and confirm the transactions of a swap."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from jupiter_arb.blockchain.client import LedgerClient
from jupiter_arb.blockchain.transactions import decode_transaction, sign_transaction
from jupiter_arb.blockchain.wallet import Wallet
from jupiter_arb.types import TransactionSet
from .confirmation import ConfirmationResult, Sleep, confirm_transaction

logger = logging.getLogger(__name__)


class ExecutionPolicy(Enum):
    """What to do with the rest of a set after a transaction does not succeed."""
    BEST_EFFORT = "best-effort"  # keep going
    FAIL_FAST = "fail-fast"      # skip the remaining transactions

    @classmethod
    def parse(cls, value: str) -> "ExecutionPolicy":
        try:
            return cls(value.strip().lower().replace("_", "-"))
        except ValueError:
            raise ValueError(f"Unknown execution policy: {value!r}") from None


@dataclass
class ExecutionReport:
    results: List[Tuple[str, ConfirmationResult]] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def all_succeeded(self) -> bool:
        return not self.skipped and all(r.succeeded for _, r in self.results)


class TransactionExecutor:
    """
    Executes a TransactionSet strictly in order: setup, swap, cleanup.

    Each transaction is decoded, signed with a fresh blockhash, submitted with
    preflight skipped, then polled for confirmation. Confirmation failures and
    timeouts are reported, not raised. Submission errors propagate.
    """

    def __init__(
        self,
        ledger: LedgerClient,
        wallet: Wallet,
        policy: ExecutionPolicy = ExecutionPolicy.BEST_EFFORT,
        max_attempts: int = 40,
        min_timeout: float = 0.5,
        max_timeout: float = 1.0,
        backoff_factor: float = 2.0,
        explorer_tx_url: str = "https://solscan.io/tx/",
        sleep: Sleep = asyncio.sleep,
    ):
        self.ledger = ledger
        self.wallet = wallet
        self.policy = policy
        self.max_attempts = max_attempts
        self.min_timeout = min_timeout
        self.max_timeout = max_timeout
        self.backoff_factor = backoff_factor
        self.explorer_tx_url = explorer_tx_url
        self._sleep = sleep

    async def submit(self, payload: str) -> str:
        tx = decode_transaction(payload)
        blockhash = await self.ledger.get_latest_blockhash()
        sign_transaction(tx, self.wallet, blockhash)
        return await self.ledger.send_raw_transaction(bytes(tx))

    async def execute(self, tx_set: TransactionSet) -> ExecutionReport:
        report = ExecutionReport()
        pending = tx_set.transactions()

        for index, (name, payload) in enumerate(pending):
            signature = await self.submit(payload)
            result = await confirm_transaction(
                self.ledger,
                signature,
                max_attempts=self.max_attempts,
                min_timeout=self.min_timeout,
                max_timeout=self.max_timeout,
                factor=self.backoff_factor,
                sleep=self._sleep,
            )
            report.results.append((name, result))

            if result.succeeded:
                logger.info(f"Transaction successful: {self.explorer_tx_url}{signature}")
                continue

            logger.debug(f"{name} transaction {result.status.value} after {result.attempts} poll(s): {signature}")
            if self.policy is ExecutionPolicy.FAIL_FAST:
                report.skipped = [n for n, _ in pending[index + 1:]]
                if report.skipped:
                    logger.debug(f"Skipping {report.skipped} after {name} did not confirm")
                break

        return report
