"""Investment calculator and ratings."""

from .investment import PROJECTION_YEARS, acquisition_costs, compute_results, loan_amortization
from .rating import Rating, rate_cash_flow, rate_yield

__all__ = [
    "PROJECTION_YEARS",
    "acquisition_costs",
    "compute_results",
    "loan_amortization",
    "Rating",
    "rate_cash_flow",
    "rate_yield",
]
