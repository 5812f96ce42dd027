"""Jupiter aggregator APIs."""

from .client import JupiterClient, JupiterError
from .quotes import QuoteClient
from .swaps import TransactionBuilder

__all__ = ["JupiterClient", "JupiterError", "QuoteClient", "TransactionBuilder"]
