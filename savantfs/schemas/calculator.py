# This project was developed with assistance from AI tools.
"""Repayment calculator schemas."""

from pydantic import BaseModel, Field

PRINCIPAL_MIN = 100_000
PRINCIPAL_MAX = 2_000_000
RATE_MIN = 1.0
RATE_MAX = 12.0
TERM_MIN = 5
TERM_MAX = 35


class LoanParameters(BaseModel):
    """The three bounded calculator inputs."""

    principal: float = Field(default=600_000, ge=PRINCIPAL_MIN, le=PRINCIPAL_MAX)
    annual_rate_percent: float = Field(default=6.2, ge=RATE_MIN, le=RATE_MAX)
    term_years: int = Field(default=30, ge=TERM_MIN, le=TERM_MAX)


class RepaymentQuote(BaseModel):
    """Monthly repayment plus display strings for the calculator card."""

    principal: float
    annual_rate_percent: float
    term_years: int
    monthly_repayment: float
    principal_display: str
    monthly_repayment_display: str
    rate_display: str
    term_display: str


class InputRange(BaseModel):
    """Slider configuration for one calculator input."""

    min: float
    max: float
    step: float
    default: float


class CalculatorConfig(BaseModel):
    """Everything a front end needs to render the calculator."""

    principal: InputRange
    annual_rate_percent: InputRange
    term_years: InputRange
    default_quote: RepaymentQuote
