"""Conversion between human units and base units (lamports) for a token."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from .types import Token

Number = Union[Decimal, int, str, float]


def to_base_units(token: Token, amount: Number) -> int:
    """round(amount * 10^decimals), half-up."""
    human = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
    if human < 0:
        raise ValueError(f"Amount must be non-negative: {amount}")
    return int(human.scaleb(token.decimals).to_integral_value(rounding=ROUND_HALF_UP))


def to_human_units(token: Token, base_amount: int) -> Decimal:
    """Exact base_amount / 10^decimals."""
    return Decimal(int(base_amount)).scaleb(-token.decimals)
