# unserialize_tool/core/types/result.py

"""Result monad for callers that want decode errors as data"""

# Standard library imports
from typing import Callable
from typing import TypeIs

# Third party imports
from pydantic import BaseModel

# Local imports
from unserialize_tool.core.domain.enums import ErrorKind
from unserialize_tool.core.domain.errors import UnserializeError


class Ok[T](BaseModel):
    """Success result."""

    value: T

    def map[U](self, func: Callable[[T], U]) -> "Ok[U]":
        """Map function over success value."""
        return Ok(value=func(self.value))

    def flat_map[U](self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Flat map for chaining operations."""
        return func(self.value)

    def unwrap(self) -> T:
        return self.value


class Err(BaseModel):
    """Error result."""

    error: str
    kind: ErrorKind
    offset: int | None = None

    def map[U](self, func: Callable[[object], U]) -> "Err":
        """Map has no effect on errors."""
        return self

    def flat_map[U](self, func: Callable[[object], "Result[U]"]) -> "Err":
        """Flat map has no effect on errors."""
        return self

    def unwrap(self) -> None:
        """Raise the error this result was built from"""
        raise _ERROR_TYPES[self.kind](self.error, self.offset)

    @classmethod
    def from_exception(cls, error: UnserializeError) -> "Err":
        return cls(error=error.message, kind=error.kind, offset=error.offset)


type Result[T] = Ok[T] | Err


def is_ok[T](result: "Result[T]") -> TypeIs[Ok[T]]:
    """Type guard for successful results."""
    return isinstance(result, Ok)


def is_err[T](result: "Result[T]") -> TypeIs[Err]:
    """Type guard for failed results."""
    return isinstance(result, Err)


def _error_types() -> dict[ErrorKind, type[UnserializeError]]:
    pending = list(UnserializeError.__subclasses__())
    found: dict[ErrorKind, type[UnserializeError]] = {}
    while pending:
        error_type = pending.pop()
        found.setdefault(error_type.kind, error_type)
        pending.extend(error_type.__subclasses__())
    return found


_ERROR_TYPES = _error_types()

__all__ = ["Ok", "Err", "Result", "is_ok", "is_err"]
