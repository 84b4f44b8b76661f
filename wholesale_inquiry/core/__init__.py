"""Core modules for inquiry processing."""

from .logging import bind_request_context, configure_logging, get_logger
from .models import (
    InquiryPayload,
    ValidationResult,
    RenderedEmail,
    OutboundEmail,
    DispatchResult,
)
from .errors import InquiryError, MethodNotAllowed, ClientValidationError, ProviderError

__all__ = [
    "bind_request_context",
    "configure_logging",
    "get_logger",
    "InquiryPayload",
    "ValidationResult",
    "RenderedEmail",
    "OutboundEmail",
    "DispatchResult",
    "InquiryError",
    "MethodNotAllowed",
    "ClientValidationError",
    "ProviderError",
]
