"""Solana RPC client implementing the LedgerClient protocol."""

import logging
from typing import Optional

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solana.rpc.models import TxOpts
from solders.hash import Hash
from solders.signature import Signature

from jupiter_arb.errors import LedgerError
from .client import LedgerTransaction

logger = logging.getLogger(__name__)


class SolanaConnectionError(LedgerError):
    """Connection-related errors."""


class SolanaLedgerClient:
    """
    Async Solana JSON-RPC client.

    General queries use `commitment`; confirmation lookups use
    `confirm_commitment`. Transactions are submitted with preflight skipped.
    """

    def __init__(
        self,
        url: str,
        commitment: str = "processed",
        confirm_commitment: str = "confirmed",
        timeout: float = 10.0,
    ):
        self.url = url
        self.commitment = Commitment(commitment)
        self.confirm_commitment = Commitment(confirm_commitment)
        self.timeout = timeout
        self._client: Optional[AsyncClient] = None

    async def connect(self) -> bool:
        """Open the RPC client. Returns True if the node answers a health check."""
        self._client = AsyncClient(self.url, commitment=self.commitment, timeout=self.timeout)
        try:
            healthy = await self._client.is_connected()
        except Exception as e:
            logger.error(f"Failed to reach Solana RPC at {self.url}: {e}")
            return False
        if healthy:
            logger.info(f"Connected to Solana RPC at {self.url}")
        else:
            logger.warning(f"Solana RPC at {self.url} did not pass health check")
        return healthy

    async def disconnect(self):
        if self._client:
            await self._client.close()
            self._client = None
            logger.info("Disconnected from Solana RPC")

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()

    def _rpc(self) -> AsyncClient:
        if not self._client:
            raise SolanaConnectionError("Not connected to Solana RPC")
        return self._client

    async def get_latest_blockhash(self) -> Hash:
        try:
            resp = await self._rpc().get_latest_blockhash(self.commitment)
        except LedgerError:
            raise
        except Exception as e:
            raise LedgerError(f"getLatestBlockhash failed: {e}")
        return resp.value.blockhash

    async def send_raw_transaction(self, raw: bytes) -> str:
        opts = TxOpts(skip_preflight=True, preflight_commitment=self.commitment)
        try:
            resp = await self._rpc().send_raw_transaction(raw, opts=opts)
        except LedgerError:
            raise
        except Exception as e:
            raise LedgerError(f"sendTransaction failed: {e}")
        return str(resp.value)

    async def get_transaction(self, signature: str) -> Optional[LedgerTransaction]:
        try:
            resp = await self._rpc().get_transaction(
                Signature.from_string(signature),
                commitment=self.confirm_commitment,
                max_supported_transaction_version=0,
            )
        except LedgerError:
            raise
        except Exception as e:
            raise LedgerError(f"getTransaction failed: {e}")

        tx = resp.value
        if tx is None:
            return None
        meta = tx.transaction.meta
        return LedgerTransaction(
            signature=signature,
            slot=tx.slot,
            err=meta.err if meta else None,
        )

