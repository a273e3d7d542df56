# This project was developed with assistance from AI tools.
"""Enquiry email composition and dispatch.

Turns a contact-form submission into a plain-text email for the operator
mailbox and hands it to the mail relay. Nothing here validates content:
missing fields render as empty strings under their labels.
"""

import logging
from email.errors import HeaderParseError
from email.headerregistry import Address
from email.message import EmailMessage

from ..core.config import Settings
from ..schemas.contact import EnquiryRequest
from .mail import MailRelay

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT_TOPIC = "General enquiry"


def _single_line(value: str) -> str:
    """Collapse CR/LF so submitted text can sit in a header."""
    return " ".join(value.splitlines()).strip()


def compose_enquiry_text(req: EnquiryRequest) -> str:
    """Plain-text body with one fixed label per field."""
    return f"""
New enquiry from the SavantFS website:

Name: {req.name}
Email: {req.email}
Phone: {req.phone}
Service: {req.service}

Message:
{req.message}
""".strip()


def enquiry_subject(req: EnquiryRequest) -> str:
    return f"New enquiry: {_single_line(req.service) or DEFAULT_SUBJECT_TOPIC}"


def reply_to_address(email: str, fallback: str) -> Address:
    """Submitter's address when it parses as ``local@domain``, else the fallback.

    The raw value still appears in the body, so an unusable address only
    costs the one-click reply, never the enquiry.
    """
    candidate = _single_line(email)
    if candidate:
        try:
            address = Address(addr_spec=candidate)
        except (ValueError, IndexError, HeaderParseError):
            logger.info("Submitter email not usable as Reply-To; using fallback")
        else:
            if address.username and address.domain:
                return address
    return Address(addr_spec=fallback)


def build_enquiry_message(req: EnquiryRequest, cfg: Settings) -> EmailMessage:
    """Address and wrap the composed body.

    Reply-To points at the submitter so the operator can answer directly,
    falling back to the business address when no usable email was given.
    """
    msg = EmailMessage()
    msg["From"] = Address(display_name=cfg.ENQUIRY_FROM_NAME, addr_spec=cfg.ENQUIRY_FROM_ADDRESS)
    msg["To"] = cfg.ENQUIRY_TO_ADDRESS
    msg["Reply-To"] = reply_to_address(req.email, cfg.ENQUIRY_FALLBACK_REPLY_TO)
    msg["Subject"] = enquiry_subject(req)
    msg.set_content(compose_enquiry_text(req))
    return msg


async def dispatch_enquiry(req: EnquiryRequest, relay: MailRelay, cfg: Settings) -> None:
    """Compose and send one enquiry. Relay and header errors propagate."""
    message = build_enquiry_message(req, cfg)
    await relay.send(message)
    logger.info("Enquiry email accepted by relay (subject=%r)", message["Subject"])
