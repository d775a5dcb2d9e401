"""Unit tests for the investment calculator."""

import pytest

from simulocatif.core.exceptions import InvalidParameterError
from simulocatif.core.financial import amortize
from simulocatif.domain.calculator import PROJECTION_YEARS, compute_results, loan_amortization
from simulocatif.domain.models import InvestmentParams


class TestKnownScenario:
    """Default form scenario."""

    def test_acquisition(self, default_params):
        res = compute_results(default_params)
        assert res.actual_notary_fees == pytest.approx(15000)
        assert res.total_investment == pytest.approx(230000)
        assert res.loan_amount == pytest.approx(190000)

    def test_monthly_payment(self, default_params, annuity_payment):
        res = compute_results(default_params)
        assert res.monthly_payment == pytest.approx(annuity_payment(190000, 3.5, 20))
        assert res.monthly_payment == pytest.approx(1102, abs=1)

    def test_rent_and_expenses(self, default_params):
        res = compute_results(default_params)
        assert res.annual_rent == pytest.approx(800 * 12 * 0.95)
        assert res.annual_expenses == pytest.approx(50 * 12 + 1200)

    def test_cash_flow(self, default_params):
        res = compute_results(default_params)
        expected = res.annual_rent - res.annual_expenses - res.monthly_payment * 12
        assert res.annual_cash_flow == pytest.approx(expected)
        assert res.monthly_cash_flow == pytest.approx(expected / 12)
        assert res.monthly_cash_flow < 0
        assert res.monthly_savings_effort == pytest.approx(-res.monthly_cash_flow)

    def test_yields(self, default_params):
        res = compute_results(default_params)
        assert res.gross_yield == pytest.approx(9120 / 230000 * 100)
        assert res.net_yield == pytest.approx(res.annual_cash_flow / 230000 * 100)

    def test_twenty_year_income(self, default_params):
        res = compute_results(default_params)
        assert res.twenty_year_total_rent == pytest.approx(9120 * 20)
        assert res.twenty_year_total_expenses == pytest.approx(1800 * 20 + res.monthly_payment * 12 * 20)
        assert res.twenty_year_net_income == pytest.approx(
            res.twenty_year_total_rent - res.twenty_year_total_expenses
        )
        assert res.twenty_year_return == pytest.approx(res.twenty_year_net_income / 230000 * 100)

    def test_patrimony(self, default_params):
        res = compute_results(default_params)
        assert res.property_value_after_20_years == pytest.approx(200000 * 1.015 ** 20)
        assert res.remaining_loan_after_20_years == 0.0
        assert res.net_equity_after_20_years == pytest.approx(res.property_value_after_20_years)
        expected = (res.net_equity_after_20_years - 40000 + res.twenty_year_net_income) / 40000 * 100
        assert res.total_patrimonial_return == pytest.approx(expected)


class TestLoanTerms:
    """Loan terms around the 20-year projection horizon."""

    def test_long_loan_remaining_balance(self, default_params_data):
        params = InvestmentParams(**{**default_params_data, "loan_term": 25})
        res = compute_results(params)
        loan = amortize(res.loan_amount, 3.5, 25)

        assert res.remaining_loan_after_20_years == pytest.approx(loan.schedule[PROJECTION_YEARS * 12 - 1].remaining_balance)
        assert 0 < res.remaining_loan_after_20_years < res.loan_amount
        assert res.net_equity_after_20_years == pytest.approx(
            res.property_value_after_20_years - res.remaining_loan_after_20_years
        )

    def test_long_loan_payments_capped_at_twenty_years(self, default_params_data):
        params = InvestmentParams(**{**default_params_data, "loan_term": 30})
        res = compute_results(params)
        assert res.twenty_year_total_expenses == pytest.approx(1800 * 20 + res.monthly_payment * 12 * 20)

    def test_short_loan_payments(self, default_params_data):
        params = InvestmentParams(**{**default_params_data, "loan_term": 15})
        res = compute_results(params)
        assert res.remaining_loan_after_20_years == 0.0
        assert res.twenty_year_total_expenses == pytest.approx(1800 * 20 + res.monthly_payment * 12 * 15)

    def test_zero_rate(self, default_params_data):
        params = InvestmentParams(**{**default_params_data, "interest_rate": 0})
        res = compute_results(params)
        assert res.monthly_payment == pytest.approx(190000 / 240)

    def test_loan_amortization_matches_results(self, default_params):
        loan = loan_amortization(default_params)
        assert loan.monthly_payment == pytest.approx(compute_results(default_params).monthly_payment)
        assert loan.nmonths == 240


class TestCashFlowCases:

    def test_positive_cash_flow_has_no_savings_effort(self, default_params_data):
        params = InvestmentParams(**{**default_params_data, "monthly_rent": 2500})
        res = compute_results(params)
        assert res.monthly_cash_flow > 0
        assert res.monthly_savings_effort == 0.0

    def test_full_vacancy(self, default_params_data):
        params = InvestmentParams(**{**default_params_data, "vacancy_rate": 100})
        res = compute_results(params)
        assert res.annual_rent == 0.0
        assert res.gross_yield == 0.0

    def test_tax_fields_are_inert(self, default_params_data):
        real = compute_results(InvestmentParams(**default_params_data))
        micro = compute_results(InvestmentParams(**{**default_params_data, "tax_system": "micro", "tax_rate": 45}))
        assert real == micro

    def test_negative_appreciation(self, default_params_data):
        params = InvestmentParams(**{**default_params_data, "annual_appreciation": -1.0})
        res = compute_results(params)
        assert res.property_value_after_20_years < 200000


class TestErrorPolicy:
    """Inputs that would divide by zero or borrow a negative amount."""

    def test_zero_down_payment_rejected(self, default_params_data):
        params = InvestmentParams(**{**default_params_data, "down_payment": 0})
        with pytest.raises(InvalidParameterError) as exc_info:
            compute_results(params)
        assert exc_info.value.param_name == "down_payment"

    def test_down_payment_above_total_rejected(self, default_params_data):
        params = InvestmentParams(**{**default_params_data, "down_payment": 250000})
        with pytest.raises(InvalidParameterError, match="exceeds the total investment"):
            compute_results(params)

    def test_overflowing_result_rejected(self, default_params_data):
        """A finite but huge price overflows the 20-year property value."""
        params = InvestmentParams(**{**default_params_data, "purchase_price": 1e306, "annual_appreciation": 100})
        with pytest.raises(InvalidParameterError) as exc_info:
            compute_results(params)
        assert exc_info.value.param_name == "property_value_after_20_years"

    def test_down_payment_equal_to_total(self, default_params_data):
        """Cash purchase: no loan, no repayment."""
        params = InvestmentParams(**{**default_params_data, "down_payment": 230000})
        res = compute_results(params)
        assert res.loan_amount == 0.0
        assert res.monthly_payment == 0.0
        assert res.monthly_cash_flow == pytest.approx((9120 - 1800) / 12)
