# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error response schema."""

from pydantic import BaseModel, Field

_HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    413: "Payload Too Large",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    See https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str = "about:blank"
    title: str = Field(description="Short human-readable summary of the problem.")
    status: int
    detail: str = ""
    request_id: str = Field(default="", description="Correlation ID for log lookup.")
    instance: str = ""

    @classmethod
    def for_status(cls, status_code: int, detail: str, request_id: str) -> "ErrorResponse":
        return cls(
            title=_HTTP_STATUS_TITLES.get(status_code, "Error"),
            status=status_code,
            detail=detail,
            request_id=request_id,
        )
