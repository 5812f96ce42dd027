"""Bounded confirmation polling."""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from jupiter_arb.blockchain.client import LedgerClient
from jupiter_arb.errors import LedgerError

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[Any]]


class ConfirmationStatus(Enum):
    SUCCESS = "success"
    FAILED = "failed"        # included, but the ledger recorded an execution error
    TIMED_OUT = "timed_out"  # never visible within the retry budget


@dataclass(frozen=True)
class ConfirmationResult:
    status: ConfirmationStatus
    signature: str
    attempts: int
    error: Optional[Any] = None

    @property
    def succeeded(self) -> bool:
        return self.status is ConfirmationStatus.SUCCESS


def retry_delay(attempt: int, min_timeout: float, max_timeout: float, factor: float = 2.0) -> float:
    """Delay after the `attempt`-th miss (0-based), clamped to [min, max]."""
    return max(min_timeout, min(min_timeout * factor ** attempt, max_timeout))


async def confirm_transaction(
    ledger: LedgerClient,
    signature: str,
    max_attempts: int = 40,
    min_timeout: float = 0.5,
    max_timeout: float = 1.0,
    factor: float = 2.0,
    sleep: Sleep = asyncio.sleep,
) -> ConfirmationResult:
    """
    Poll the ledger until the transaction is visible or the budget runs out.

    A missing result and a transport error are both treated as "not yet
    visible". Returns a SUCCESS, FAILED or TIMED_OUT result; never raises for
    ledger outcomes.
    """
    for attempt in range(1, max_attempts + 1):
        try:
            tx = await ledger.get_transaction(signature)
        except LedgerError as e:
            logger.debug(f"Poll {attempt}/{max_attempts} for {signature} failed: {e}")
            tx = None

        if tx is not None:
            if tx.succeeded:
                return ConfirmationResult(ConfirmationStatus.SUCCESS, signature, attempt)
            return ConfirmationResult(ConfirmationStatus.FAILED, signature, attempt, error=tx.err)

        if attempt < max_attempts:
            await sleep(retry_delay(attempt - 1, min_timeout, max_timeout, factor))

    return ConfirmationResult(ConfirmationStatus.TIMED_OUT, signature, max_attempts)
