"""External services used by the inquiry endpoint."""

from .resend import EmailProvider, ResendClient
from .inquiry import InquiryHandler

__all__ = ["EmailProvider", "ResendClient", "InquiryHandler"]
