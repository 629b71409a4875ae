"""Translation of domain errors into HTTP errors."""

from fastapi import HTTPException

from showroom.domain.exceptions import DomainError


def to_http_exception(exc: DomainError) -> HTTPException:
    """Build an HTTPException carrying the domain error's code and message."""
    return HTTPException(
        status_code=exc.status_code,
        detail={
            "error_code": exc.error_code,
            "message": exc.message,
        },
    )
