"""
Jupiter self-arbitrage bot.

Structure:
    jupiter_arb/
    ├── types.py          # Token, Quote, TransactionSet
    ├── units.py          # human units <-> base units
    ├── profit.py         # profit decision rule
    ├── tokens/           # token registry lookup
    ├── blockchain/       # wallet, Solana RPC client
    ├── jupiter/          # quote + swap APIs
    ├── execution/        # sign, submit, confirm
    └── loop.py           # arbitrage loop

Usage:
    from jupiter_arb import Token, TradeConfig, ArbitrageLoop
    from jupiter_arb.blockchain import SolanaLedgerClient, Wallet
    from jupiter_arb.jupiter import JupiterClient, QuoteClient, TransactionBuilder
    from jupiter_arb.execution import TransactionExecutor
"""

from .errors import (
    ArbBotError, BuildFailed, LedgerError, QuoteUnavailable,
    TokenCatalogError, TokenNotFound, WalletError,
)
from .loop import ArbitrageLoop, IterationResult, TradeConfig
from .profit import is_profitable
from .types import Quote, Token, TransactionSet
from .units import to_base_units, to_human_units

__all__ = [
    # Errors
    "ArbBotError", "BuildFailed", "LedgerError", "QuoteUnavailable",
    "TokenCatalogError", "TokenNotFound", "WalletError",
    # Types
    "Token", "Quote", "TransactionSet",
    # Logic
    "to_base_units", "to_human_units", "is_profitable",
    "ArbitrageLoop", "IterationResult", "TradeConfig",
]
