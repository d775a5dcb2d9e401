"""Financial calculation functions.

Core loan and amortization calculations for rental investments.
"""

from __future__ import annotations

import math

import numpy_financial as npf
import structlog

from simulocatif.core.exceptions import AmortizationError
from simulocatif.domain.models.results import AmortizationEntry, AmortizationResult

log = structlog.get_logger(__name__)


def calculate_monthly_payment(
    principal: float,
    annual_rate_pct: float,
    duration_months: int,
) -> float:
    """Calculate the constant monthly loan payment (principal + interest).

    Args:
        principal: Loan amount in €
        annual_rate_pct: Annual interest rate as percentage (e.g., 3.5 for 3.5%)
        duration_months: Loan term in months

    Returns:
        Monthly payment amount in €. A zero rate repays the principal linearly.
    """
    if principal <= 0 or duration_months <= 0:
        return 0.0

    monthly_rate = (annual_rate_pct / 100.0) / 12.0

    if monthly_rate == 0:
        return principal / duration_months

    return float(-npf.pmt(monthly_rate, duration_months, principal))


def _validate_loan(loan_amount: float, annual_rate_pct: float, term_years: float) -> int:
    """Check amortization inputs and return the term as a whole number of years."""
    for name, value in (("loan_term", term_years), ("interest_rate", annual_rate_pct), ("loan_amount", loan_amount)):
        if isinstance(value, bool) or not math.isfinite(value):
            raise AmortizationError(name, value, "must be a finite number")
    if float(term_years) != int(term_years):
        raise AmortizationError("loan_term", term_years, "must be a whole number of years")
    if int(term_years) <= 0:
        raise AmortizationError("loan_term", term_years, "must be positive")
    if annual_rate_pct < 0:
        raise AmortizationError("interest_rate", annual_rate_pct, "must not be negative")
    if loan_amount < 0:
        raise AmortizationError("loan_amount", loan_amount, "must not be negative")
    return int(term_years)


def amortize(
    loan_amount: float,
    annual_rate_pct: float,
    term_years: float,
) -> AmortizationResult:
    """Amortize a fixed-rate loan month by month.

    Args:
        loan_amount: Borrowed capital in €
        annual_rate_pct: Annual nominal rate %
        term_years: Loan duration in whole years

    Returns:
        AmortizationResult with the monthly payment, one entry per month and
        the final remaining balance (floored at 0).

    Raises:
        AmortizationError: Non-integer or non-positive term, negative rate or
            negative loan amount.
    """
    years = _validate_loan(loan_amount, annual_rate_pct, term_years)

    monthly_rate = (annual_rate_pct / 100.0) / 12.0
    total_payments = years * 12
    linear = monthly_rate == 0

    if linear:
        log.debug("amortization_linear_fallback", loan_amount=loan_amount, months=total_payments)
        monthly_payment = loan_amount / total_payments
    else:
        monthly_payment = calculate_monthly_payment(loan_amount, annual_rate_pct, total_payments)

    schedule = []
    balance = loan_amount

    for month in range(1, total_payments + 1):
        interest = balance * monthly_rate
        principal_payment = monthly_payment - interest
        balance -= principal_payment

        schedule.append(AmortizationEntry(
            month=month,
            payment=monthly_payment,
            principal_payment=principal_payment,
            interest_payment=interest,
            remaining_balance=max(0.0, balance),
        ))

    return AmortizationResult(
        monthly_payment=monthly_payment,
        schedule=schedule,
        remaining_balance=max(0.0, balance),
        linear=linear,
    )
