"""Chart-oriented projections.

Builds the yearly datasets behind the charts from the calculator outputs.
Rents and charges are held flat over time.
"""

from __future__ import annotations

import pandas as pd

from simulocatif.domain.calculator.investment import PROJECTION_YEARS
from simulocatif.domain.models import AmortizationResult, InvestmentParams, InvestmentResults


def cost_breakdown(params: InvestmentParams, results: InvestmentResults) -> pd.DataFrame:
    """Split of the total investment between price, notary fees and works."""
    df = pd.DataFrame({
        "Poste": ["Prix d'achat", "Frais de notaire", "Travaux"],
        "Montant": [params.purchase_price, results.actual_notary_fees, params.renovation_costs],
    })
    df["Part"] = df["Montant"] / results.total_investment * 100
    return df


def cash_flow_projection(
    params: InvestmentParams,
    results: InvestmentResults,
    years: int = 10,
) -> pd.DataFrame:
    """Yearly rent, charges, loan repayment and cash flow.

    The loan repayment stops once the loan term is over, so the cash flow
    rises in the years after the last payment.
    """
    rows = []
    for year in range(1, years + 1):
        repayment = results.monthly_payment * 12 if year <= params.loan_term else 0.0
        rows.append({
            "Année": year,
            "Revenus locatifs": results.annual_rent,
            "Charges": results.annual_expenses,
            "Remboursement prêt": repayment,
            "Cash flow": results.annual_rent - results.annual_expenses - repayment,
        })
    return pd.DataFrame(rows)


def yearly_amortization(loan: AmortizationResult, max_years: int = PROJECTION_YEARS) -> pd.DataFrame:
    """Interest and principal repaid per loan year."""
    columns = ["Année", "Intérêts", "Capital", "Mensualité totale", "Capital restant dû"]
    if not loan.schedule:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame([entry.model_dump() for entry in loan.schedule])
    df["Année"] = (df["month"] - 1) // 12 + 1
    yearly = df.groupby("Année").agg(
        interest=("interest_payment", "sum"),
        principal=("principal_payment", "sum"),
        balance=("remaining_balance", "last"),
    ).reset_index()
    yearly = yearly[yearly["Année"] <= max_years]

    return pd.DataFrame({
        "Année": yearly["Année"],
        "Intérêts": yearly["interest"],
        "Capital": yearly["principal"],
        "Mensualité totale": yearly["interest"] + yearly["principal"],
        "Capital restant dû": yearly["balance"],
    }).reset_index(drop=True)


def cumulative_return(
    params: InvestmentParams,
    results: InvestmentResults,
    years: int = PROJECTION_YEARS,
) -> pd.DataFrame:
    """Cumulated cash invested against cumulated positive cash flow.

    Starts from the down payment in year 0. While the loan runs and the
    cash flow is negative, the yearly repayment counts as money put in.
    """
    invested = params.down_payment
    income = 0.0
    rows = [{"Année": 0, "Investissement cumulé": invested, "Revenus cumulés": income}]

    for year in range(1, years + 1):
        if year <= params.loan_term and results.monthly_cash_flow < 0:
            invested += results.monthly_payment * 12
        income += max(0.0, results.monthly_cash_flow) * 12
        rows.append({"Année": year, "Investissement cumulé": invested, "Revenus cumulés": income})

    return pd.DataFrame(rows)


def patrimony_projection(
    params: InvestmentParams,
    loan: AmortizationResult,
    years: int = PROJECTION_YEARS,
) -> pd.DataFrame:
    """Property value, remaining debt and net equity at each year end."""
    growth = 1 + params.annual_appreciation / 100.0
    rows = []
    for year in range(1, years + 1):
        value = params.purchase_price * growth ** year
        debt = loan.balance_after(year * 12)
        rows.append({
            "Année": year,
            "Valeur du bien": value,
            "Capital restant dû": debt,
            "Valorisation nette": value - debt,
        })
    return pd.DataFrame(rows)
