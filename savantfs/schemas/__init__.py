# This project was developed with assistance from AI tools.
"""Shared schema components."""

from pydantic import BaseModel


class HealthItem(BaseModel):
    """Status of one component reported by the health endpoint."""

    name: str
    status: str
    message: str = ""
    version: str | None = None
