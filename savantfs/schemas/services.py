# This project was developed with assistance from AI tools.
"""Service catalogue schemas."""

from pydantic import BaseModel


class ServiceInfo(BaseModel):
    """Lending service shown as a card on the website."""

    id: str
    title: str
    description: str


class EnquiryOptions(BaseModel):
    """Choices offered by the enquiry form's service selector."""

    options: list[str]
    default: str
