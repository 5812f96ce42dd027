"""Ledger transport protocol used by the executor."""

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from solders.hash import Hash


@dataclass(frozen=True)
class LedgerTransaction:
    """A transaction as seen by the ledger once it is visible."""
    signature: str
    slot: Optional[int] = None
    err: Optional[Any] = None

    @property
    def succeeded(self) -> bool:
        return self.err is None


class LedgerClient(Protocol):
    """
    Interface for ledger RPC providers.

    get_transaction returns None while the transaction is not yet visible at
    the confirmation commitment.
    """

    async def get_latest_blockhash(self) -> Hash:
        ...

    async def send_raw_transaction(self, raw: bytes) -> str:
        """Submit a signed transaction with preflight skipped. Returns the signature."""
        ...

    async def get_transaction(self, signature: str) -> Optional[LedgerTransaction]:
        ...
