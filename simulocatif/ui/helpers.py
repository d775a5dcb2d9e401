"""UI helper functions.

Common formatting and display utilities (French conventions).
"""

from __future__ import annotations

from config import VARIANT_COLORS


def format_euro(value: float | None, decimals: int = 0) -> str:
    """Format a number as Euro currency.

    Args:
        value: Amount to format
        decimals: Number of decimal places

    Returns:
        Formatted string like "1 234 567 €"
    """
    if value is None:
        return "—"
    if decimals == 0:
        return f"{int(round(value)):,}".replace(",", " ") + " €"
    return f"{value:,.{decimals}f}".replace(",", " ").replace(".", ",") + " €"


def format_pct(value: float | None, decimals: int = 2) -> str:
    """Format a number as percentage.

    Args:
        value: Value to format (as percentage, not decimal)
        decimals: Number of decimal places

    Returns:
        Formatted string like "5,25 %"
    """
    if value is None:
        return "—"
    return f"{value:,.{decimals}f}".replace(",", " ").replace(".", ",") + " %"


def colorize_badge(label: str, variant: str) -> str:
    """Return colored HTML for a rating badge."""
    color = VARIANT_COLORS.get(variant, "#6c757d")
    return (
        f'<span style="background:{color};color:white;border-radius:8px;'
        f'padding:2px 8px;font-size:0.8em">{label}</span>'
    )
