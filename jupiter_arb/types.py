"""
Core types for the arbitrage bot.

Minimal Token, Quote and TransactionSet types. Uses solders for everything else.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .errors import QuoteUnavailable


@dataclass(frozen=True)
class Token:
    """
    Represents an SPL token from the registry.

    address is the mint account (base58). decimals is the base-unit scale.
    """
    symbol: str
    address: str
    decimals: int
    name: str = ""
    chain_id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.symbol} ({self.address[:8]}..)"


@dataclass(frozen=True)
class Quote:
    """One candidate route from the quote service. Amounts are base units."""
    out_amount_with_slippage: int
    route: Dict[str, Any] = field(repr=False, compare=False)
    in_amount: Optional[int] = None
    out_amount: Optional[int] = None

    @classmethod
    def from_route(cls, route: Any) -> "Quote":
        """
        Parse a raw route object, keeping it untouched for the swap builder.

        Only outAmountWithSlippage is required.
        """
        if not isinstance(route, dict):
            raise QuoteUnavailable(f"Route is not an object: {type(route).__name__}")
        try:
            return cls(
                out_amount_with_slippage=_as_int(route["outAmountWithSlippage"]),
                route=route,
                in_amount=_optional_int(route.get("inAmount")),
                out_amount=_optional_int(route.get("outAmount")),
            )
        except KeyError as e:
            raise QuoteUnavailable(f"Route missing field {e}")
        except (TypeError, ValueError) as e:
            raise QuoteUnavailable(f"Route has invalid amount: {e}")


def _optional_int(value: Any) -> Optional[int]:
    # Informational amounts; unusable values are dropped
    try:
        return None if value is None else _as_int(value)
    except (TypeError, ValueError):
        return None


def _as_int(value: Any) -> int:
    # Amounts arrive as JSON numbers or numeric strings
    if isinstance(value, bool):
        raise TypeError(f"not an amount: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"not an integer amount: {value!r}")
        return int(value)
    return int(value)


@dataclass(frozen=True)
class TransactionSet:
    """
    Serialized (base64) transactions returned by the swap builder.

    Any member may be None. Execution order is setup, swap, cleanup.
    """
    setup: Optional[str] = None
    swap: Optional[str] = None
    cleanup: Optional[str] = None

    def transactions(self) -> List[Tuple[str, str]]:
        """Non-null payloads as (name, payload), in execution order."""
        ordered = [("setup", self.setup), ("swap", self.swap), ("cleanup", self.cleanup)]
        return [(name, payload) for name, payload in ordered if payload]

    def __len__(self) -> int:
        return len(self.transactions())
