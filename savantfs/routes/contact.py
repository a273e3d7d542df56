# This project was developed with assistance from AI tools.
"""Contact form endpoint: forwards an enquiry to the operator mailbox."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..core.config import settings
from ..schemas.contact import ContactResponse, EnquiryRequest
from ..services.contact import dispatch_enquiry
from ..services.mail import MailRelay, get_mail_relay

logger = logging.getLogger(__name__)

router = APIRouter()

SEND_FAILED = "Failed to send email"


@router.post(
    "/contact",
    response_model=ContactResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ContactResponse}},
)
async def send_contact_enquiry(
    request: Request,
    relay: Annotated[MailRelay, Depends(get_mail_relay)],
):
    """Email one enquiry through the mail relay.

    The body is parsed here rather than by FastAPI so that a malformed
    payload fails the same way as a relay error: one generic 500, with
    the cause only in the server log.
    """
    try:
        enquiry = EnquiryRequest.model_validate(await request.json())
        await dispatch_enquiry(enquiry, relay, settings)
    except Exception:
        logger.exception("Error sending contact email")
        return JSONResponse(
            status_code=500,
            content=ContactResponse(ok=False, error=SEND_FAILED).model_dump(),
        )
    return ContactResponse(ok=True)
