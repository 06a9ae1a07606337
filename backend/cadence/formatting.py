"""Formatting helpers for quote output.

The engine never rounds; these helpers are where two-decimal currency
display happens.
"""

from __future__ import annotations


def format_currency(amount: float) -> str:
    """Format a currency amount with cents and comma separators, e.g. '$1,304.10'."""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def format_percent(value: float) -> str:
    """Format a percentage without trailing zeros, e.g. '15%' or '8.25%'."""
    return f"{value:g}%"
