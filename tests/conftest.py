"""Pytest fixtures for simulocatif tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from simulocatif.domain.models import InvestmentParams  # noqa: E402


@pytest.fixture
def default_params_data():
    """Default scenario of the form."""
    return {
        "purchase_price": 200000,
        "notary_fees": 7.5,
        "down_payment": 40000,
        "renovation_costs": 15000,
        "monthly_rent": 800,
        "monthly_non_recoverable_expenses": 50,
        "annual_property_tax": 1200,
        "interest_rate": 3.5,
        "loan_term": 20,
        "vacancy_rate": 5,
        "tax_rate": 30,
        "tax_system": "real",
        "annual_appreciation": 1.5,
    }


@pytest.fixture
def default_params(default_params_data):
    """Default scenario as an InvestmentParams record."""
    return InvestmentParams(**default_params_data)


@pytest.fixture
def annuity_payment():
    """Constant annuity formula, written out for comparison."""
    def _payment(loan_amount: float, annual_rate_pct: float, term_years: int) -> float:
        r = annual_rate_pct / 100 / 12
        n = term_years * 12
        return loan_amount * r * (1 + r) ** n / ((1 + r) ** n - 1)
    return _payment
