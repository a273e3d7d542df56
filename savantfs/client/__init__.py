# This project was developed with assistance from AI tools.
"""Client-side model of the website's enquiry form.

Mirrors what the browser does around POST /api/contact: required-field
checks, one request per submission, pending/success/failure outcomes and a
notification that dismisses itself.
"""

from .enquiry import (
    FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
    EnquiryForm,
    EnquiryOutcome,
    EnquirySubmitter,
    EnquiryValidationError,
    Failure,
    Idle,
    Pending,
    Success,
)
from .notifications import DISMISS_AFTER_SECONDS, Notification, NotificationCenter

__all__ = [
    "DISMISS_AFTER_SECONDS",
    "FAILURE_MESSAGE",
    "SUCCESS_MESSAGE",
    "EnquiryForm",
    "EnquiryOutcome",
    "EnquirySubmitter",
    "EnquiryValidationError",
    "Failure",
    "Idle",
    "Notification",
    "NotificationCenter",
    "Pending",
    "Success",
]
