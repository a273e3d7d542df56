# This project was developed with assistance from AI tools.
"""Lending services advertised on the site and offered in the enquiry form."""

from ..schemas.services import EnquiryOptions, ServiceInfo

SERVICES: list[ServiceInfo] = [
    ServiceInfo(
        id="residential_purchase",
        title="Residential Purchase Loans",
        description="Achieve your dream of owning a home with flexible loan options, competitive "
        "rates, and expert guidance for first-time buyers and upgraders.",
    ),
    ServiceInfo(
        id="commercial_purchase",
        title="Commercial Purchase Loans",
        description="Secure offices, warehouses, or other commercial properties with tailored "
        "lending solutions and guidance at every step.",
    ),
    ServiceInfo(
        id="refinance",
        title="Refinance",
        description="Lower your rate, consolidate debt, or access equity. We review your current "
        "structure and help you move to a smarter solution.",
    ),
    ServiceInfo(
        id="bridging",
        title="Bridging Finance",
        description="Short-term funding to help you move between properties without stress. "
        "Fast approvals and flexible terms to keep plans moving.",
    ),
    ServiceInfo(
        id="construction",
        title="Construction Loans",
        description="Finance to build your home or commercial project, with support through each "
        "stage, from pre-approval to completion.",
    ),
    ServiceInfo(
        id="ndis",
        title="NDIS Loans",
        description="Specialist lending for NDIS-approved properties or modifications, with a team "
        "that understands the program's unique requirements.",
    ),
    ServiceInfo(
        id="smsf",
        title="SMSF Loans",
        description="Use your self-managed super fund to invest in property or other assets, with "
        "lending structured around SMSF rules and tax benefits.",
    ),
    ServiceInfo(
        id="alt_doc",
        title="Alt Doc & Low Doc Loans",
        description="Options for self-employed clients and non-traditional income. We work with "
        "you to find solutions beyond standard payslip lending.",
    ),
    ServiceInfo(
        id="guidance",
        title="Financial Guidance & Support",
        description="Clear, ongoing guidance to help you understand your options, make informed "
        "decisions, and stay on track with your goals.",
    ),
]

# Selector values as the enquiry form spells them; these end up in email subjects.
SERVICE_OPTIONS: tuple[str, ...] = (
    "Residential Purchase Loans",
    "Commercial Purchase Loans",
    "Refinance",
    "Bridging Finance",
    "Construction Loans",
    "NDIS Loans",
    "SMSF Loans",
    "Alt Doc or Low Doc Loans",
    "Financial Guidance and Support",
    "Other",
)

DEFAULT_SERVICE = SERVICE_OPTIONS[0]


def enquiry_options() -> EnquiryOptions:
    return EnquiryOptions(options=list(SERVICE_OPTIONS), default=DEFAULT_SERVICE)
