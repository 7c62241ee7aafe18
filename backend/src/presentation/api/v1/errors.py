"""Mapping of domain errors to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from domain.exceptions import (
    AccessDeniedError,
    ApplicationNotFoundError,
    DomainError,
    DuplicateApplicationError,
    InvalidTransitionError,
    JobNotFoundError,
)
from infrastructure.config import get_logger, get_settings

logger = get_logger(__name__)


class AuthenticationRequiredError(Exception):
    """Raised when an endpoint needs a signed-in actor and none is present."""


STATUS_CODES: dict[type[DomainError], int] = {
    ApplicationNotFoundError: status.HTTP_404_NOT_FOUND,
    JobNotFoundError: status.HTTP_404_NOT_FOUND,
    AccessDeniedError: status.HTTP_403_FORBIDDEN,
    InvalidTransitionError: status.HTTP_409_CONFLICT,
    DuplicateApplicationError: status.HTTP_409_CONFLICT,
}


async def authentication_required_handler(
    request: Request, exc: AuthenticationRequiredError
) -> JSONResponse:
    """Send anonymous callers to the login page."""
    login_url = get_settings().login_url
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={
            "code": "UNAUTHENTICATED",
            "detail": "You need to sign in before continuing.",
            "redirect_to": login_url,
        },
        headers={"WWW-Authenticate": "Bearer", "Location": login_url},
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Convert a domain error into a JSON error response."""
    status_code = STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, AccessDeniedError):
        logger.warning(
            f"Denied {exc.action.value} on {request.url.path}",
            extra={"actor_id": exc.actor_id, "action": exc.action.value},
        )
    return JSONResponse(
        status_code=status_code,
        content={"code": exc.code, "detail": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(AuthenticationRequiredError, authentication_required_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
