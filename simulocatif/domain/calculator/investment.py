"""Rental investment calculator.

Turns an InvestmentParams record into an InvestmentResults record. Pure and
stateless: the UI calls it again from scratch on every parameter change.
"""

from __future__ import annotations

import math

import structlog

from simulocatif.core.exceptions import InvalidParameterError
from simulocatif.core.financial import amortize
from simulocatif.domain.models import AmortizationResult, InvestmentParams, InvestmentResults

log = structlog.get_logger(__name__)

PROJECTION_YEARS = 20


def acquisition_costs(params: InvestmentParams) -> tuple[float, float, float]:
    """Return (notary fees, total investment, loan amount) in €.

    Raises:
        InvalidParameterError: If the down payment exceeds the total investment.
    """
    actual_notary_fees = params.purchase_price * params.notary_fees / 100.0
    total_investment = params.purchase_price + actual_notary_fees + params.renovation_costs
    loan_amount = total_investment - params.down_payment

    if total_investment <= 0:
        raise InvalidParameterError("total_investment", total_investment, "must be positive")
    if loan_amount < 0:
        raise InvalidParameterError(
            "down_payment",
            params.down_payment,
            f"exceeds the total investment of {total_investment:.2f} €",
        )
    return actual_notary_fees, total_investment, loan_amount


def loan_amortization(params: InvestmentParams) -> AmortizationResult:
    """Amortization schedule of the loan financing the investment."""
    _, _, loan_amount = acquisition_costs(params)
    return amortize(loan_amount, params.interest_rate, params.loan_term)


def compute_results(params: InvestmentParams) -> InvestmentResults:
    """Compute all investment metrics.

    Args:
        params: Investment parameters

    Returns:
        InvestmentResults with cash flow, yields and 20-year projections.

    Raises:
        InvalidParameterError: Zero down payment (divisor of the patrimonial
            return), down payment above the total investment, or loan inputs
            that cannot be amortized.
    """
    if params.down_payment <= 0:
        raise InvalidParameterError(
            "down_payment", params.down_payment, "must be positive to compute the patrimonial return"
        )

    actual_notary_fees, total_investment, loan_amount = acquisition_costs(params)
    loan = amortize(loan_amount, params.interest_rate, params.loan_term)
    monthly_payment = loan.monthly_payment
    remaining_loan_after_20_years = (
        loan.balance_after(PROJECTION_YEARS * 12) if params.loan_term > PROJECTION_YEARS else 0.0
    )

    # Rent net of vacancy
    annual_rent = params.monthly_rent * 12 * (1 - params.vacancy_rate / 100.0)
    annual_expenses = params.monthly_non_recoverable_expenses * 12 + params.annual_property_tax

    annual_cash_flow = annual_rent - annual_expenses - monthly_payment * 12
    monthly_cash_flow = annual_cash_flow / 12

    gross_yield = annual_rent / total_investment * 100
    net_yield = annual_cash_flow / total_investment * 100
    monthly_savings_effort = max(0.0, -monthly_cash_flow)

    twenty_year_total_rent = annual_rent * PROJECTION_YEARS
    twenty_year_total_expenses = (
        annual_expenses * PROJECTION_YEARS
        + monthly_payment * 12 * min(params.loan_term, PROJECTION_YEARS)
    )
    twenty_year_net_income = twenty_year_total_rent - twenty_year_total_expenses
    twenty_year_return = twenty_year_net_income / total_investment * 100

    property_value_after_20_years = params.purchase_price * (
        1 + params.annual_appreciation / 100.0
    ) ** PROJECTION_YEARS
    net_equity_after_20_years = property_value_after_20_years - remaining_loan_after_20_years
    total_patrimonial_return = (
        (net_equity_after_20_years - params.down_payment + twenty_year_net_income)
        / params.down_payment
        * 100
    )

    metrics = dict(
        loan_amount=loan_amount,
        monthly_payment=monthly_payment,
        actual_notary_fees=actual_notary_fees,
        total_investment=total_investment,
        annual_rent=annual_rent,
        annual_expenses=annual_expenses,
        monthly_cash_flow=monthly_cash_flow,
        annual_cash_flow=annual_cash_flow,
        gross_yield=gross_yield,
        net_yield=net_yield,
        monthly_savings_effort=monthly_savings_effort,
        twenty_year_total_rent=twenty_year_total_rent,
        twenty_year_total_expenses=twenty_year_total_expenses,
        twenty_year_net_income=twenty_year_net_income,
        twenty_year_return=twenty_year_return,
        property_value_after_20_years=property_value_after_20_years,
        remaining_loan_after_20_years=remaining_loan_after_20_years,
        net_equity_after_20_years=net_equity_after_20_years,
        total_patrimonial_return=total_patrimonial_return,
    )

    # Huge but finite inputs can still overflow
    out_of_range = [name for name, value in metrics.items() if not math.isfinite(value)]
    if out_of_range:
        raise InvalidParameterError(
            out_of_range[0], metrics[out_of_range[0]], "result out of range for these parameters"
        )
    results = InvestmentResults(**metrics)

    log.debug(
        "results_computed",
        loan_amount=round(loan_amount, 2),
        monthly_payment=round(monthly_payment, 2),
        monthly_cash_flow=round(monthly_cash_flow, 2),
        gross_yield=round(gross_yield, 2),
    )
    return results
