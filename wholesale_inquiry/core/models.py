"""
Data models for wholesale inquiries.

The form payload is a pydantic model; results passed between the
validation, rendering and dispatch steps are plain dataclasses.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import BaseModel

# Declared order drives the "Missing required fields" message
REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "contact_method",
    "business_name",
    "business_type",
    "address",
    "city",
    "zip",
    "coffee_program",
    "message",
)

OPTIONAL_FIELDS: tuple[str, ...] = ("title", "phone", "business_website", "volume")

BUSINESS_TYPE_LABELS: dict[str, str] = {
    "coffee_shop": "Coffee Shop",
    "restaurant": "Restaurant",
    "office": "Office",
    "other": "Other",
    "special_request": "Special Request",
}

COFFEE_PROGRAM_LABELS: dict[str, str] = {
    "dedicated_roaster": "Dedicated Roaster",
    "multi_roaster": "Multi-Roaster",
    "rotating_roaster": "Rotating Roaster",
}


def clean_value(value: Any) -> str | None:
    """Return the value if it is a non-blank string, otherwise None."""
    if not isinstance(value, str) or not value.strip():
        return None
    return value


class InquiryPayload(BaseModel):
    """A validated wholesale inquiry form submission."""

    name: str
    email: str
    contact_method: str
    business_name: str
    business_type: str
    address: str
    city: str
    zip: str
    coffee_program: str
    message: str
    title: str | None = None
    phone: str | None = None
    business_website: str | None = None
    volume: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "InquiryPayload":
        """Build a payload from raw form data, dropping blank optional fields.

        Unknown keys are ignored. Required fields must already be validated.
        """
        values = {key: data.get(key) for key in REQUIRED_FIELDS}
        for key in OPTIONAL_FIELDS:
            values[key] = clean_value(data.get(key))
        return cls(**values)


@dataclass
class ValidationResult:
    """Outcome of validating a raw form payload."""

    missing_fields: list[str] = field(default_factory=list)
    email_valid: bool = True

    @property
    def is_valid(self) -> bool:
        return not self.missing_fields and self.email_valid

    @property
    def error_message(self) -> str | None:
        """Client-facing error message, or None when valid."""
        if self.missing_fields:
            return f"Missing required fields: {', '.join(self.missing_fields)}"
        if not self.email_valid:
            return "Invalid email address"
        return None


@dataclass
class RenderedEmail:
    """Subject and HTML body rendered from an inquiry."""

    subject: str
    html: str


@dataclass
class OutboundEmail:
    """Email as sent to the provider."""

    sender: str
    to: list[str]
    subject: str
    html: str
    reply_to: str

    def to_resend(self) -> dict[str, Any]:
        """JSON body for the Resend send-email endpoint."""
        return {
            "from": self.sender,
            "to": list(self.to),
            "subject": self.subject,
            "html": self.html,
            "reply_to": self.reply_to,
        }


@dataclass
class DispatchResult:
    """Result of handing an email to the provider."""

    success: bool
    status_code: int | None = None
    error: str | None = None
