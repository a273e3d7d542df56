# This project was developed with assistance from AI tools.
"""Repayment calculation logic.

Pure math, no I/O. The public API route and any front end recompute the
quote from scratch whenever one of the three inputs changes.
"""

from ..schemas.calculator import (
    PRINCIPAL_MAX,
    PRINCIPAL_MIN,
    RATE_MAX,
    RATE_MIN,
    TERM_MAX,
    TERM_MIN,
    CalculatorConfig,
    InputRange,
    LoanParameters,
    RepaymentQuote,
)

PRINCIPAL_STEP = 10_000
RATE_STEP = 0.05
TERM_STEP = 1


def monthly_repayment(principal: float, annual_rate_percent: float, term_years: int) -> float:
    """Fixed monthly payment for a fully amortizing principal-and-interest loan.

    P = L * r / (1 - (1 + r)^-n), with r the monthly rate and n the number
    of monthly periods. A zero rate falls back to straight-line repayment.
    Callers must keep term_years positive.
    """
    r = annual_rate_percent / 100 / 12
    n = term_years * 12
    if r == 0:
        return principal / n
    return principal * r / (1 - (1 + r) ** -n)


def format_whole_amount(amount: float) -> str:
    """Render with thousands separators and no decimals, e.g. ``600,000``."""
    return f"{amount:,.0f}"


def format_amount(amount: float) -> str:
    """Render with thousands separators and exactly two decimals."""
    return f"{amount:,.2f}"


def quote_repayment(params: LoanParameters) -> RepaymentQuote:
    """Compute the monthly repayment and its display strings."""
    payment = monthly_repayment(params.principal, params.annual_rate_percent, params.term_years)
    return RepaymentQuote(
        principal=params.principal,
        annual_rate_percent=params.annual_rate_percent,
        term_years=params.term_years,
        monthly_repayment=round(payment, 2),
        principal_display=format_whole_amount(params.principal),
        monthly_repayment_display=format_amount(payment),
        rate_display=f"{params.annual_rate_percent:.2f}%",
        term_display=f"{params.term_years} years",
    )


def calculator_config() -> CalculatorConfig:
    """Slider bounds, steps and defaults, plus the quote for the defaults."""
    defaults = LoanParameters()
    return CalculatorConfig(
        principal=InputRange(
            min=PRINCIPAL_MIN, max=PRINCIPAL_MAX, step=PRINCIPAL_STEP, default=defaults.principal
        ),
        annual_rate_percent=InputRange(
            min=RATE_MIN, max=RATE_MAX, step=RATE_STEP, default=defaults.annual_rate_percent
        ),
        term_years=InputRange(
            min=TERM_MIN, max=TERM_MAX, step=TERM_STEP, default=defaults.term_years
        ),
        default_quote=quote_repayment(defaults),
    )
