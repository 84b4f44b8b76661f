"""
Errors raised while handling an inquiry.

Each error carries the HTTP status and the client-safe message returned
to the caller. Diagnostic detail stays on the exception for logging.
"""


class InquiryError(Exception):
    """Base error for the inquiry endpoint; maps to a generic 500."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MethodNotAllowed(InquiryError):
    status_code = 405
    message = "Method not allowed"


class ClientValidationError(InquiryError):
    """Missing required fields or a malformed email address."""

    status_code = 400


class ProviderError(InquiryError):
    """The email provider answered with a non-success status."""

    status_code = 502
    message = "Failed to send email. Please try again."

    def __init__(self, provider_status: int, provider_body: str = ""):
        super().__init__()
        self.provider_status = provider_status
        self.provider_body = provider_body
