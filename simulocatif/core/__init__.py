"""Core loan calculations and application plumbing."""

from .exceptions import (
    AmortizationError,
    ConfigurationError,
    InvalidParameterError,
    SimulocatifError,
)
from .financial import amortize, calculate_monthly_payment

__all__ = [
    "amortize",
    "calculate_monthly_payment",
    # Exceptions
    "SimulocatifError",
    "InvalidParameterError",
    "AmortizationError",
    "ConfigurationError",
]
