"""
Public wholesale inquiry form endpoint.

Receives form submissions from the storefront's wholesale page and
emails them to the wholesale team via Resend.
"""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wholesale_inquiry.config import settings
from wholesale_inquiry.core.errors import InquiryError, MethodNotAllowed
from wholesale_inquiry.core.logging import bind_request_context, get_logger
from wholesale_inquiry.services.inquiry import InquiryHandler
from wholesale_inquiry.services.resend import EmailProvider, ResendClient

log = get_logger(__name__)

router = APIRouter()

INQUIRY_PATH = "/wholesale-inquiry"

# TODO: restrict Allow-Origin to the storefront domain once it is final
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

# Methods outside this list are answered by inquiry_http_exception_handler
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_email_provider() -> EmailProvider:
    """Email provider used to send inquiries."""
    return ResendClient(api_key=settings.resend_api_key)


def _error_response(error: InquiryError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"error": error.message},
        headers=CORS_HEADERS,
    )


async def inquiry_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Answer unrouted methods on the inquiry path with the JSON 405 body.

    Everything else keeps FastAPI's default handling.
    """
    if exc.status_code == 405 and request.url.path == INQUIRY_PATH:
        return _error_response(MethodNotAllowed())
    return await http_exception_handler(request, exc)


@router.api_route(INQUIRY_PATH, methods=ROUTED_METHODS)
async def wholesale_inquiry(
    request: Request,
    provider: EmailProvider = Depends(get_email_provider),
):
    """
    Email a wholesale inquiry form submission to the wholesale team.

    OPTIONS is answered as a CORS preflight; only POST is processed.
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    if request.method != "POST":
        return _error_response(MethodNotAllowed())

    bind_request_context(path=request.url.path)

    try:
        # Malformed JSON and a null body fall through to the generic 500
        data = await request.json()
        if data is None:
            raise ValueError("Request body is JSON null")
        if not isinstance(data, dict):
            data = {}

        handler = InquiryHandler(provider)
        await handler.submit(data)
    except InquiryError as e:
        return _error_response(e)
    except Exception:
        log.exception("inquiry_handler_error")
        return _error_response(InquiryError())

    return JSONResponse(
        status_code=200,
        content={"success": True, "message": "Inquiry sent successfully"},
        headers=CORS_HEADERS,
    )
