"""Amortization and result data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AmortizationEntry(BaseModel):
    """One month of a loan amortization schedule."""

    month: int = Field(..., ge=1)
    payment: float
    principal_payment: float
    interest_payment: float
    remaining_balance: float = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class AmortizationResult(BaseModel):
    """Monthly payment with its full amortization schedule."""

    monthly_payment: float
    schedule: list[AmortizationEntry] = Field(default_factory=list)
    remaining_balance: float = Field(default=0.0, ge=0)
    linear: bool = Field(default=False, description="Zero-rate linear repayment was used")

    model_config = ConfigDict(frozen=True)

    @property
    def nmonths(self) -> int:
        return len(self.schedule)

    def balance_after(self, months: int) -> float:
        """Remaining balance once `months` payments have been made.

        Zero past the end of the loan; the initial principal is not part of
        the schedule so `months` must be at least 1.
        """
        if months < 1:
            raise ValueError("months must be >= 1")
        if months >= self.nmonths:
            return 0.0
        return self.schedule[months - 1].remaining_balance


class InvestmentResults(BaseModel):
    """Derived financial metrics for one set of parameters.

    Amounts are in €, yields and returns in %.
    """

    # Financing
    loan_amount: float
    monthly_payment: float
    actual_notary_fees: float
    total_investment: float

    # Yearly aggregates
    annual_rent: float
    annual_expenses: float

    # Cash flow & yields
    monthly_cash_flow: float
    annual_cash_flow: float
    gross_yield: float
    net_yield: float
    monthly_savings_effort: float = Field(..., ge=0)

    # 20-year income
    twenty_year_total_rent: float
    twenty_year_total_expenses: float
    twenty_year_net_income: float
    twenty_year_return: float

    # 20-year patrimony
    property_value_after_20_years: float
    remaining_loan_after_20_years: float = Field(..., ge=0)
    net_equity_after_20_years: float
    total_patrimonial_return: float

    model_config = ConfigDict(frozen=True)
