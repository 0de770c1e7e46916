"""
Error types and the Ok/Err result returned by validating operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ValidationErrorKind(Enum):
    INVALID_LENGTH = "InvalidLength"
    NO_CHARACTER_CLASS_SELECTED = "NoCharacterClassSelected"
    SALT_TOO_SHORT = "SaltTooShort"
    SALT_TOO_LONG = "SaltTooLong"


class ValidationError(Exception):
    """Input rejected before any work was done."""

    def __init__(self, kind: ValidationErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.kind, self.message) == (other.kind, other.message)

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        return f"ValidationError({self.kind.value}, {self.message!r})"


class ProcessingError(Exception):
    """Host-environment failure (clipboard, display) outside the engine."""


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ValidationError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """
        Raise the carried error, for callers that prefer exceptions.
        """
        raise self.error


Result = Union[Ok[T], Err]
