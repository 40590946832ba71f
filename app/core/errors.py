import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def errors(self) -> list[dict]:
        return [{"msg": self.message}]


class ValidationError(AppError):
    message = "Invalid request"

    def __init__(self, errors: list[dict], message: str | None = None):
        self._errors = errors
        super().__init__(message or (errors[0]["msg"] if errors else None))

    def errors(self) -> list[dict]:
        return list(self._errors)


class ConflictError(AppError):
    message = "User already exists"


class AuthError(AppError):
    message = "Invalid Credentials"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found"


class InvalidTokenError(AppError):
    message = "Invalid token"


class DeliveryError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Email could not be sent"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"


def error_response(exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": exc.message, "errors": exc.errors()},
    )


async def handle_app_error(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return error_response(exc)


def _field_message(error: dict) -> str:
    # Messages raised from our own validators arrive wrapped as "Value error, ...".
    ctx_error = (error.get("ctx") or {}).get("error")
    if isinstance(ctx_error, ValueError):
        return str(ctx_error)
    return error.get("msg", "Invalid value")


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if part != "body"]
        entry = {"msg": _field_message(error)}
        if loc:
            entry["param"] = ".".join(str(part) for part in loc)
        errors.append(entry)
    return await handle_app_error(request, ValidationError(errors))


async def internal_error_boundary(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(InternalError())
