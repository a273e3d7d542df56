# This project was developed with assistance from AI tools.
"""Public API routes -- no authentication required."""

from fastapi import APIRouter

from ..schemas.calculator import CalculatorConfig, LoanParameters, RepaymentQuote
from ..schemas.services import EnquiryOptions, ServiceInfo
from ..services.calculator import calculator_config, quote_repayment
from ..services.catalogue import SERVICES, enquiry_options

router = APIRouter()


@router.get("/services", response_model=list[ServiceInfo])
async def list_services() -> list[ServiceInfo]:
    """Return the lending services advertised on the site."""
    return SERVICES


@router.get("/enquiry-options", response_model=EnquiryOptions)
async def get_enquiry_options() -> EnquiryOptions:
    """Return the enquiry form's service choices and default selection."""
    return enquiry_options()


@router.get("/calculator", response_model=CalculatorConfig)
async def get_calculator_config() -> CalculatorConfig:
    """Return slider bounds, steps and defaults for the repayment calculator."""
    return calculator_config()


@router.post("/calculate-repayment", response_model=RepaymentQuote)
async def calculate_repayment(params: LoanParameters) -> RepaymentQuote:
    """Estimate the monthly repayment for a principal-and-interest loan.

    Out-of-range inputs are rejected with 422 before the calculation runs.
    """
    return quote_repayment(params)
