"""Application services."""

from .projection import (
    cash_flow_projection,
    cost_breakdown,
    cumulative_return,
    patrimony_projection,
    yearly_amortization,
)

__all__ = [
    "cost_breakdown",
    "cash_flow_projection",
    "yearly_amortization",
    "cumulative_return",
    "patrimony_projection",
]
