"""Profit decision rule."""

from decimal import Decimal


def profit(input_amount: Decimal, output_amount: Decimal) -> Decimal:
    return output_amount - input_amount


def is_profitable(input_amount: Decimal, output_amount: Decimal, desired_profit: Decimal) -> bool:
    """True when the round trip gains at least desired_profit (human units)."""
    return profit(input_amount, output_amount) >= desired_profit
