"""
Explicit success/failure result returned by the browsing facade.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories surfaced to callers."""

    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Either a value or an error kind with a caller-safe message.

    Messages never carry filesystem paths.
    """

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "Outcome[T]":
        return cls(error=error, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Return the value of a successful outcome.

        Raises:
            ValueError: If the outcome is a failure
        """
        if self.error is not None:
            raise ValueError(f"Outcome failed with {self.error.value}: {self.message}")
        return self.value  # type: ignore[return-value]
