"""Data models for simulocatif."""

from .params import DEFAULT_ANNUAL_APPRECIATION_PCT, InvestmentParams, TaxSystem
from .results import AmortizationEntry, AmortizationResult, InvestmentResults

__all__ = [
    "DEFAULT_ANNUAL_APPRECIATION_PCT",
    "InvestmentParams",
    "TaxSystem",
    "AmortizationEntry",
    "AmortizationResult",
    "InvestmentResults",
]
