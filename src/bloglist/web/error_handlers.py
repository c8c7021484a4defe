import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from bloglist.errors import (
    AccessDeniedError,
    AuthenticationError,
    MalformedIdError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)

logger = structlog.get_logger(__name__)


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    if isinstance(exc, AuthenticationError):
        status_code = 401
        error_type = "authentication_error"
    elif isinstance(exc, AccessDeniedError):
        status_code = 403
        error_type = "access_denied"
    elif isinstance(exc, NotFoundError):
        status_code = 404
        error_type = "not_found"
    elif isinstance(exc, MalformedIdError):
        status_code = 400
        error_type = "malformed_id"
    elif isinstance(exc, ValidationError):
        status_code = 400
        error_type = exc.error_type
    else:
        status_code = 400
        error_type = "bad_request"

    return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type)


async def store_unavailable_handler(request: Request, exc: Exception) -> Response:
    """Database unreachable or timed out (503). pymongo ConnectionFailure is routed here too."""
    error = exc if isinstance(exc, StoreUnavailableError) else StoreUnavailableError()
    logger.error("store_unavailable", path=request.url.path, error=str(exc))
    return create_json_error_response(status_code=503, message=str(error), error_type="store_unavailable")


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("unexpected_error", error=str(exc))
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )


async def request_validation_handler(_: Request, exc: Exception) -> Response:
    """Malformed request bodies (wrong JSON types) are client errors like any other validation failure."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    if errors:
        location = ".".join(str(part) for part in errors[0]["loc"] if part != "body")
        message = f"{location}: {errors[0]['msg']}" if location else errors[0]["msg"]
    else:
        message = "Invalid request"
    return create_json_error_response(status_code=400, message=message, error_type="validation_error")
