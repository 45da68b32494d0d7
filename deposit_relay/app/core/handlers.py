import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from deposit_relay.app.core.errors import ErrorMessage, FIELD_MESSAGES, bad_request, internal_error
from deposit_relay.app.core.exceptions import AppException, EngineRequestError

logger = logging.getLogger(__name__)


def render_error(exc: AppException) -> JSONResponse:
    message = exc.message
    if isinstance(exc, EngineRequestError):
        message = exc.upstream_message or exc.message
    return JSONResponse(
        status_code=exc.http_status,
        content={"error": message or ErrorMessage.DEPOSIT_FAILED},
    )


async def app_exception_handler(request: Request, exc: AppException):
    return render_error(exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    failed = {part for err in errors for part in err.get("loc", ()) if part in FIELD_MESSAGES}
    for field, message in FIELD_MESSAGES.items():
        if field in failed:
            return render_error(bad_request(message, details={"field": field}))
    if any(err.get("type") == "json_invalid" for err in errors):
        return render_error(bad_request(ErrorMessage.INVALID_BODY))
    # Missing body or not an object, so offchainId is missing too.
    return render_error(bad_request(ErrorMessage.INVALID_OFFCHAIN_ID))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Error processing %s %s", request.method, request.url.path)
    return render_error(internal_error())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
