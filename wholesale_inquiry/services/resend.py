"""
Resend API client for sending inquiry emails.
"""

from abc import ABC, abstractmethod

import httpx

from wholesale_inquiry.config import settings
from wholesale_inquiry.core.logging import get_logger
from wholesale_inquiry.core.models import DispatchResult, OutboundEmail

log = get_logger(__name__)


class EmailProvider(ABC):
    """Abstract interface for a transactional email provider."""

    @abstractmethod
    async def send(self, email: OutboundEmail) -> DispatchResult:
        """
        Hand an email to the provider.

        Args:
            email: Fully built outbound email

        Returns:
            DispatchResult; a rejected send is reported, not raised
        """
        pass


class ResendClient(EmailProvider):
    """HTTP client for the Resend send-email endpoint."""

    def __init__(
        self,
        api_key: str,
        api_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.api_url = api_url or settings.resend_api_url
        self._transport = transport

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    async def send(self, email: OutboundEmail) -> DispatchResult:
        # Network errors propagate to the caller; there is no retry
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(
                self.api_url,
                headers=self._headers,
                json=email.to_resend(),
            )

        if not response.is_success:
            return DispatchResult(
                success=False,
                status_code=response.status_code,
                error=response.text,
            )

        log.info("resend_email_accepted", status=response.status_code)
        return DispatchResult(success=True, status_code=response.status_code)
