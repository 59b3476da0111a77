"""Interface layer errors.

Domain errors leave the API as JSON bodies carrying the error's message and
its stable code.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logfire

from agora.domain.error import DomainError

STATUS_BY_CODE: dict[str, int] = {
    "not_found": status.HTTP_404_NOT_FOUND,
    "invalid_argument": status.HTTP_400_BAD_REQUEST,
    "poll_ended": status.HTTP_400_BAD_REQUEST,
    "invalid_option": status.HTTP_400_BAD_REQUEST,
    "multiple_not_allowed": status.HTTP_400_BAD_REQUEST,
    "too_many_choices": status.HTTP_400_BAD_REQUEST,
    "conflict": status.HTTP_409_CONFLICT,
    "internal": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error; unknown codes are server errors."""
    return STATUS_BY_CODE.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a DomainError as ``{"detail": ..., "code": ...}``."""
    status_code = status_for(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed", path=request.url.path, code=exc.code, error=str(exc)
        )
        detail = "Internal server error"
    else:
        detail = str(exc)
    return JSONResponse(
        status_code=status_code, content={"detail": detail, "code": exc.code}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
