# This project was developed with assistance from AI tools.
"""Health check endpoint."""

from fastapi import APIRouter

from .. import __version__
from ..core.config import settings
from ..schemas import HealthItem

router = APIRouter()


@router.get("/", response_model=list[HealthItem])
async def health() -> list[HealthItem]:
    """Report API liveness and whether the mail relay is configured.

    The relay is not contacted; a reachable-but-misconfigured relay only
    shows up when an enquiry is sent.
    """
    if settings.SMTP_HOST:
        mail = HealthItem(
            name="Mail relay",
            status="healthy",
            message=f"SMTP relay {settings.SMTP_HOST}:{settings.SMTP_PORT}",
        )
    else:
        mail = HealthItem(
            name="Mail relay",
            status="degraded",
            message="SMTP_HOST not set; enquiries cannot be sent",
        )
    return [
        HealthItem(name="API", status="healthy", message="Running", version=__version__),
        mail,
    ]
