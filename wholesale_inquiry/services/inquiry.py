"""
Wholesale inquiry handling, independent of the HTTP layer.

Validates a parsed form payload, renders the notification email and
hands it to the configured email provider.
"""

from typing import Any, Mapping

from wholesale_inquiry.core.errors import ClientValidationError, ProviderError
from wholesale_inquiry.core.logging import get_logger
from wholesale_inquiry.core.models import DispatchResult, InquiryPayload, OutboundEmail
from wholesale_inquiry.core.rendering import render_inquiry_email
from wholesale_inquiry.core.validation import validate_inquiry
from wholesale_inquiry.services.resend import EmailProvider

log = get_logger(__name__)

FROM_ADDRESS = "Wholesale Inquiries <wholesale@wholesale.cosmopolis.com>"
TO_ADDRESSES = ["ccarrigan@cosmopolis.com"]


class InquiryHandler:
    """Turns a form submission into an email sent through the provider."""

    def __init__(self, provider: EmailProvider):
        self.provider = provider

    def build_email(self, payload: InquiryPayload) -> OutboundEmail:
        rendered = render_inquiry_email(payload)
        return OutboundEmail(
            sender=FROM_ADDRESS,
            to=list(TO_ADDRESSES),
            subject=rendered.subject,
            html=rendered.html,
            reply_to=payload.email,
        )

    async def submit(self, data: Mapping[str, Any]) -> DispatchResult:
        """
        Validate, render and send one inquiry.

        Args:
            data: Parsed request body

        Returns:
            DispatchResult of the accepted send

        Raises:
            ClientValidationError: required fields missing or email malformed
            ProviderError: the provider rejected the email
        """
        result = validate_inquiry(data)
        if not result.is_valid:
            log.info("inquiry_rejected", reason=result.error_message)
            raise ClientValidationError(result.error_message)

        payload = InquiryPayload.from_mapping(data)
        email = self.build_email(payload)

        dispatch = await self.provider.send(email)
        if not dispatch.success:
            log.error(
                "resend_api_error",
                status=dispatch.status_code,
                body=dispatch.error,
            )
            raise ProviderError(dispatch.status_code, dispatch.error or "")

        log.info("inquiry_sent", business_name=payload.business_name)
        return dispatch
