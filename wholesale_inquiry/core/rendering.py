"""
HTML rendering for wholesale inquiry emails.

The template is rendered with autoescaping off. Every user-supplied value
goes through the ``esc`` filter (``escape_html``).
"""

from typing import Any

from jinja2 import Environment, PackageLoader

from .models import BUSINESS_TYPE_LABELS, COFFEE_PROGRAM_LABELS, InquiryPayload, RenderedEmail

_ESCAPE_TABLE = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})


def escape_html(value: Any) -> str:
    """Escape a value for interpolation into HTML in a single pass.

    Missing or empty values escape to an empty string.
    """
    if not value:
        return ""
    return str(value).translate(_ESCAPE_TABLE)


def _label(labels: dict[str, str], code: str) -> str:
    # Labels are static and trusted; unknown codes are user input
    return labels.get(code) or escape_html(code)


def business_type_label(code: str) -> str:
    return _label(BUSINESS_TYPE_LABELS, code)


def coffee_program_label(code: str) -> str:
    return _label(COFFEE_PROGRAM_LABELS, code)


def build_subject(business_name: str) -> str:
    return f"Wholesale Inquiry — {business_name}"


_env = Environment(
    loader=PackageLoader("wholesale_inquiry", "templates"),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["esc"] = escape_html


def render_inquiry_html(payload: InquiryPayload) -> str:
    """Render the inquiry notification body.

    Optional rows (title, phone, website, volume) are left out entirely
    when the submitter did not provide them.
    """
    template = _env.get_template("inquiry_email.html")
    return template.render(
        inquiry=payload,
        business_type_label=business_type_label(payload.business_type),
        coffee_program_label=coffee_program_label(payload.coffee_program),
    )


def render_inquiry_email(payload: InquiryPayload) -> RenderedEmail:
    return RenderedEmail(
        subject=build_subject(payload.business_name),
        html=render_inquiry_html(payload),
    )
