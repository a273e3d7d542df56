# This project was developed with assistance from AI tools.
"""Enquiry (contact form) schemas."""

from typing import Any

from pydantic import BaseModel, field_validator


class EnquiryRequest(BaseModel):
    """Contact form submission.

    Every field is optional and normalised to a string: absent or null
    values become ``""`` so the composed email never renders ``None``.
    Service membership and email format are not checked here.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    service: str = ""
    message: str = ""

    @field_validator("name", "email", "phone", "service", "message", mode="before")
    @classmethod
    def _coerce_to_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, int | float | bool):
            return str(value)
        raise ValueError("expected a string")


class ContactResponse(BaseModel):
    """Body returned by POST /api/contact."""

    ok: bool
    error: str | None = None
