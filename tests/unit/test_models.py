"""Unit tests for the pydantic data models."""

import pytest
from pydantic import ValidationError

from simulocatif.domain.models import (
    DEFAULT_ANNUAL_APPRECIATION_PCT,
    InvestmentParams,
    TaxSystem,
)


class TestInvestmentParams:

    def test_camel_case_aliases(self):
        """Form payloads use camelCase names."""
        params = InvestmentParams(
            purchasePrice=200000,
            notaryFees=7.5,
            downPayment=40000,
            monthlyNonRecoverableExpenses=50,
            annualPropertyTax=1200,
            taxSystem="micro",
        )
        assert params.purchase_price == 200000
        assert params.monthly_non_recoverable_expenses == 50
        assert params.tax_system is TaxSystem.MICRO

    def test_default_appreciation(self, default_params_data):
        data = dict(default_params_data)
        del data["annual_appreciation"]
        assert InvestmentParams(**data).annual_appreciation == DEFAULT_ANNUAL_APPRECIATION_PCT == 1.5

    def test_explicit_zero_appreciation_kept(self, default_params_data):
        params = InvestmentParams(**{**default_params_data, "annual_appreciation": 0})
        assert params.annual_appreciation == 0

    def test_frozen(self, default_params):
        with pytest.raises(ValidationError):
            default_params.purchase_price = 1

    def test_model_copy_yields_new_record(self, default_params):
        changed = default_params.model_copy(update={"monthly_rent": 900})
        assert changed.monthly_rent == 900
        assert default_params.monthly_rent == 800

    def test_integral_float_term(self, default_params_data):
        assert InvestmentParams(**{**default_params_data, "loan_term": 20.0}).loan_term == 20

    @pytest.mark.parametrize("field,value", [
        ("purchase_price", 0),
        ("purchase_price", -1),
        ("notary_fees", -0.1),
        ("down_payment", -1),
        ("interest_rate", -0.5),
        ("loan_term", 0),
        ("loan_term", 20.5),
        ("vacancy_rate", 101),
        ("tax_rate", -1),
        ("tax_system", "lmnp"),
        ("annual_appreciation", -100),
        ("annual_appreciation", 101),
        ("annual_appreciation", 1e18),
        ("interest_rate", 101),
        ("notary_fees", 150),
        ("loan_term", 51),
        ("loan_term", 10**9),
        ("purchase_price", float("inf")),
        ("purchase_price", float("nan")),
        ("monthly_rent", float("inf")),
        ("down_payment", float("nan")),
    ])
    def test_rejects_invalid_fields(self, default_params_data, field, value):
        with pytest.raises(ValidationError):
            InvestmentParams(**{**default_params_data, field: value})
