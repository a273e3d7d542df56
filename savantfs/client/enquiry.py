# This project was developed with assistance from AI tools.
"""Enquiry form state and submission pipeline.

``EnquirySubmitter.submit()`` performs exactly one POST per call. There is
no retry: a failed submission is terminal and the user resubmits by hand.
"""

import logging
from dataclasses import dataclass, field
from typing import Literal

import httpx

from ..services.catalogue import DEFAULT_SERVICE, SERVICE_OPTIONS
from .notifications import Notification, NotificationCenter

logger = logging.getLogger(__name__)

CONTACT_ENDPOINT = "/api/contact"

SUCCESS_MESSAGE = "Thanks! Your enquiry has been sent to the SavantFS team."
FAILURE_MESSAGE = (
    "Something went wrong sending your enquiry. "
    "Please try again or email info@savantfs.com.au."
)

REQUIRED_FIELDS = ("name", "email")


class EnquiryValidationError(ValueError):
    """The form cannot be submitted as filled in."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Invalid or missing fields: {', '.join(fields)}")


# -- Outcomes --


@dataclass(frozen=True)
class Idle:
    status: Literal["idle"] = "idle"


@dataclass(frozen=True)
class Pending:
    status: Literal["pending"] = "pending"


@dataclass(frozen=True)
class Success:
    message: str = SUCCESS_MESSAGE
    status: Literal["success"] = "success"


@dataclass(frozen=True)
class Failure:
    detail: str = FAILURE_MESSAGE
    status: Literal["failure"] = "failure"


EnquiryOutcome = Idle | Pending | Success | Failure


# -- Form --


@dataclass
class EnquiryForm:
    """The five contact form fields, as the browser holds them."""

    name: str | None = ""
    email: str | None = ""
    phone: str | None = ""
    service: str | None = DEFAULT_SERVICE
    message: str | None = ""

    def validate(self) -> None:
        """Block submission the way the browser's required attributes do: empty only."""
        invalid = [f for f in REQUIRED_FIELDS if not getattr(self, f)]
        if self.service not in SERVICE_OPTIONS:
            invalid.append("service")
        if invalid:
            raise EnquiryValidationError(invalid)

    def to_payload(self) -> dict[str, str]:
        """JSON body for the contact endpoint; unset fields become ``""``."""
        return {
            "name": self.name or "",
            "email": self.email or "",
            "phone": self.phone or "",
            "service": self.service or "",
            "message": self.message or "",
        }

    def reset(self) -> None:
        self.name = ""
        self.email = ""
        self.phone = ""
        self.service = DEFAULT_SERVICE
        self.message = ""


# -- Submission --


@dataclass
class EnquirySubmitter:
    """Drives one form instance through idle -> pending -> success/failure.

    The HTTP client is expected to carry the site's base URL. While a
    submission is in flight ``is_submitting`` is True and further submits
    are refused, matching the disabled submit button.
    """

    http_client: httpx.AsyncClient
    notifications: NotificationCenter = field(default_factory=NotificationCenter)
    outcome: EnquiryOutcome = field(default_factory=Idle)
    is_submitting: bool = False

    async def submit(self, form: EnquiryForm) -> EnquiryOutcome:
        form.validate()
        if self.is_submitting:
            logger.debug("Submission already in flight; ignoring duplicate submit")
            return self.outcome

        self.is_submitting = True
        self.outcome = Pending()
        try:
            response = await self.http_client.post(CONTACT_ENDPOINT, json=form.to_payload())
            if not response.is_success:
                raise httpx.HTTPStatusError(
                    f"Contact endpoint returned {response.status_code}",
                    request=response.request,
                    response=response,
                )
        except httpx.HTTPError as exc:
            logger.warning("Enquiry submission failed: %s", exc)
            self.outcome = Failure()
            self.notifications.show(Notification(kind="error", message=self.outcome.detail))
        else:
            self.outcome = Success()
            self.notifications.show(Notification(kind="success", message=self.outcome.message))
            form.reset()
        finally:
            self.is_submitting = False
        return self.outcome
