"""Qualitative ratings for the headline metrics.

Thresholds follow common rules of thumb for French buy-to-let investments.
"""

from __future__ import annotations

from typing import NamedTuple

# (min value, label, variant), highest first
YIELD_THRESHOLDS = [
    (6.0, "Excellente", "success"),
    (4.0, "Bonne", "default"),
    (2.0, "Moyenne", "caution"),
]
YIELD_FLOOR = ("Faible", "danger")

CASH_FLOW_THRESHOLDS = [
    (300.0, "Excellent", "success"),
    (100.0, "Bon", "default"),
    (0.0, "Équilibré", "caution"),
]
CASH_FLOW_FLOOR = ("Négatif", "danger")


class Rating(NamedTuple):
    label: str
    variant: str


def _rate(value: float, thresholds: list[tuple[float, str, str]], floor: tuple[str, str]) -> Rating:
    for minimum, label, variant in thresholds:
        if value >= minimum:
            return Rating(label, variant)
    return Rating(*floor)


def rate_yield(yield_pct: float) -> Rating:
    """Rate a gross or net yield given in %."""
    return _rate(yield_pct, YIELD_THRESHOLDS, YIELD_FLOOR)


def rate_cash_flow(monthly_cash_flow: float) -> Rating:
    """Rate a monthly cash flow in €."""
    return _rate(monthly_cash_flow, CASH_FLOW_THRESHOLDS, CASH_FLOW_FLOOR)
