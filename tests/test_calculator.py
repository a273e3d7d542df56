# This project was developed with assistance from AI tools.
"""Tests for the repayment calculator (pure functions, no HTTP)."""

import pytest

from savantfs.schemas.calculator import LoanParameters
from savantfs.services.calculator import (
    calculator_config,
    format_amount,
    format_whole_amount,
    monthly_repayment,
    quote_repayment,
)


def _amortized(principal, rate_percent, years):
    r = rate_percent / 100 / 12
    n = years * 12
    return principal * r / (1 - (1 + r) ** -n)


# -- Core formula --


def test_reference_loan_matches_amortization_formula():
    """600k at 6.2% over 30 years."""
    payment = monthly_repayment(600_000, 6.2, 30)
    assert payment == pytest.approx(_amortized(600_000, 6.2, 30), rel=1e-12)
    assert 3674 < payment < 3676


def test_zero_rate_is_straight_line():
    assert monthly_repayment(120_000, 0, 10) == pytest.approx(1000.0)
    assert monthly_repayment(600_000, 0.0, 30) == pytest.approx(600_000 / 360)


def test_same_inputs_give_identical_output():
    first = monthly_repayment(875_000, 7.35, 25)
    second = monthly_repayment(875_000, 7.35, 25)
    assert first == second


@pytest.mark.parametrize("principal", [100_000, 450_000, 1_200_000, 2_000_000])
def test_payment_times_periods_exceeds_principal(principal):
    """With a positive rate, total repaid is always more than the amount borrowed."""
    assert monthly_repayment(principal, 5.0, 20) * 240 > principal


# -- Monotonicity --


def test_payment_increases_with_principal():
    payments = [monthly_repayment(p, 6.2, 30) for p in range(100_000, 2_000_001, 100_000)]
    assert all(a < b for a, b in zip(payments, payments[1:], strict=False))


def test_payment_increases_with_rate():
    rates = [1 + i * 0.05 for i in range(221)]  # 1.00% .. 12.00%
    payments = [monthly_repayment(600_000, r, 30) for r in rates]
    assert all(a < b for a, b in zip(payments, payments[1:], strict=False))


def test_payment_decreases_with_term():
    payments = [monthly_repayment(600_000, 6.2, y) for y in range(5, 36)]
    assert all(a > b for a, b in zip(payments, payments[1:], strict=False))


# -- Formatting and quotes --


def test_format_helpers():
    assert format_whole_amount(600_000) == "600,000"
    assert format_whole_amount(1_999_999.6) == "2,000,000"
    assert format_amount(3674.8) == "3,674.80"
    assert format_amount(999.999) == "1,000.00"


def test_quote_for_defaults():
    quote = quote_repayment(LoanParameters())
    assert quote.principal_display == "600,000"
    assert quote.rate_display == "6.20%"
    assert quote.term_display == "30 years"
    assert quote.monthly_repayment == round(monthly_repayment(600_000, 6.2, 30), 2)
    assert quote.monthly_repayment_display == format_amount(monthly_repayment(600_000, 6.2, 30))
    assert quote.monthly_repayment_display.startswith("3,67")


def test_loan_parameters_enforce_bounds():
    with pytest.raises(ValueError):
        LoanParameters(principal=99_999)
    with pytest.raises(ValueError):
        LoanParameters(annual_rate_percent=12.5)
    with pytest.raises(ValueError):
        LoanParameters(term_years=4)
    edge = LoanParameters(principal=2_000_000, annual_rate_percent=1, term_years=35)
    assert quote_repayment(edge).monthly_repayment > 0


def test_calculator_config_matches_slider_ranges():
    cfg = calculator_config()
    assert (cfg.principal.min, cfg.principal.max, cfg.principal.step) == (100_000, 2_000_000, 10_000)
    assert (cfg.annual_rate_percent.min, cfg.annual_rate_percent.max) == (1, 12)
    assert cfg.annual_rate_percent.step == pytest.approx(0.05)
    assert (cfg.term_years.min, cfg.term_years.max, cfg.term_years.step) == (5, 35, 1)
    assert cfg.default_quote == quote_repayment(LoanParameters())
