"""Custom exceptions for simulocatif.

Domain-specific exception types for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any


class SimulocatifError(Exception):
    """Base exception for all simulocatif errors."""
    pass


# --- Calculation Errors ---

class InvalidParameterError(SimulocatifError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class AmortizationError(InvalidParameterError):
    """Loan inputs that cannot be amortized."""
    pass


# --- Configuration Errors ---

class ConfigurationError(SimulocatifError):
    """Error in application configuration."""
    pass
