"""
Tagged result type returned by the readiness and landmark services.

Services never raise for the expected failure modes (missing input records,
landmark validation, persistence errors); they return an
:class:`Err` carrying an :class:`ErrorKind` instead.  Both variants expose
``data`` and ``error`` so callers can also treat a result as the familiar
``{data, error}`` pair::

    result = compute_readiness(store, user_id, day)
    if result.ok:
        use(result.value)
    else:
        log(result.error)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories surfaced by the services."""

    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    PERSISTENCE_FAILED = "persistence_failed"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome wrapping ``value``."""

    value: T

    ok = True

    @property
    def data(self) -> T:
        return self.value

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class Err:
    """Failed outcome.

    ``details`` carries structured context, e.g. the full list of landmark
    validation messages.
    """

    kind: ErrorKind
    message: str
    details: list[str] = field(default_factory=list)

    ok = False

    @property
    def data(self) -> None:
        return None

    @property
    def error(self) -> str:
        return self.message


Result = Union[Ok[T], Err]


def not_found(message: str) -> Err:
    return Err(ErrorKind.NOT_FOUND, message)


def validation_failed(errors: list[str]) -> Err:
    return Err(ErrorKind.VALIDATION_FAILED, "; ".join(errors), list(errors))


def persistence_failed(exc: Optional[BaseException] = None, context: str = "") -> Err:
    message = f"{context}: {exc}" if context and exc is not None else (context or str(exc))
    return Err(ErrorKind.PERSISTENCE_FAILED, message)

