"""
Display formatting for money and percentages.

A single display format is supported: two decimals, space-grouped
thousands, comma as decimal separator and a trailing currency symbol
(e.g. "120 000,00 €").
"""

import re

from roicalc.config import get_settings


def format_number(value: float) -> str:
    """Format a number with two decimals ("1 234,56")."""
    text = f"{value:,.2f}"
    return text.replace(",", " ").replace(".", ",")


def format_currency(value: float) -> str:
    """Format a money amount ("1 234,56 €")."""
    return f"{format_number(value)} {get_settings().currency_symbol}"


def format_percent(value: float) -> str:
    """Format a percentage ("12,50%")."""
    return f"{format_number(value)}%"


def parse_currency(value: str) -> float:
    """
    Parse a money string typed by a user.

    Everything except digits and separators is dropped; only the last
    "." or "," is kept and treated as the decimal point. Unparseable
    input yields 0.
    """
    clean = re.sub(r"[^0-9.,]", "", value)
    clean = re.sub(r"[.,](?=.*[.,])", "", clean)
    clean = clean.replace(",", ".")

    try:
        return float(clean)
    except ValueError:
        return 0.0
