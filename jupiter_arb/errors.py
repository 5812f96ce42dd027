"""Exception hierarchy for the arbitrage bot."""


class ArbBotError(Exception):
    """Base exception for bot errors."""


# Fatal at startup

class TokenNotFound(ArbBotError):
    """No catalog entry matches the requested symbol."""

class TokenCatalogError(ArbBotError):
    """Token catalog could not be loaded."""

class WalletError(ArbBotError):
    """Wallet secret missing or not a valid keypair."""


# Transient, caught at the loop's iteration boundary

class QuoteUnavailable(ArbBotError):
    """Quote request failed or returned a malformed body."""

class BuildFailed(ArbBotError):
    """Swap-building request failed or returned a malformed body."""

class LedgerError(ArbBotError):
    """Ledger transport rejected or could not decode a transaction."""
