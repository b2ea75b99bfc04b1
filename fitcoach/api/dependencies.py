"""
Shared API dependencies.

Reusable FastAPI dependencies and the mapping from service results to
HTTP errors.
"""

from typing import TypeVar

from fastapi import HTTPException, status

from fitcoach.core.result import Err, ErrorKind, Ok, Result

T = TypeVar("T")

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION_FAILED: status.HTTP_422_UNPROCESSABLE_CONTENT,
    ErrorKind.PERSISTENCE_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def raise_for_error(err: Err) -> None:
    """Raise the HTTPException matching ``err``."""
    detail = err.details if err.kind is ErrorKind.VALIDATION_FAILED else err.message
    raise HTTPException(status_code=_STATUS_BY_KIND[err.kind], detail=detail)


def result_or_raise(result: Result[T]) -> T:
    """Return the value of ``result`` or raise its HTTPException."""
    if isinstance(result, Ok):
        return result.value
    raise_for_error(result)
