"""Explicit outcome type for repository operations.

Not-found is a normal outcome of a natural-key lookup, so it is returned
rather than raised. Storage faults are still raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class RepositoryResult(Generic[T]):
    """Value on success, ``error`` + ``message`` otherwise."""

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "RepositoryResult[T]":
        return cls(value=value)

    @classmethod
    def not_found(cls, message: str) -> "RepositoryResult[T]":
        return cls(error=ErrorKind.NOT_FOUND, message=message)
