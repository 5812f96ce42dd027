"""Solana ledger access: wallet, transport protocol and RPC adapter."""

from .client import LedgerClient, LedgerTransaction
from .solana_client import SolanaConnectionError, SolanaLedgerClient
from .transactions import decode_transaction, sign_transaction
from .wallet import Wallet

__all__ = [
    "LedgerClient", "LedgerTransaction",
    "SolanaConnectionError", "SolanaLedgerClient",
    "decode_transaction", "sign_transaction",
    "Wallet",
]
