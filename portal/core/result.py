# File: portal/core/result.py

"""
Value-or-error container returned by the data-access layer.

Services build one with `Result.success(value)` or `Result.failure(error)`.
Callers either inspect `.ok` / `.error` or call `.unwrap()`, which hands the
value back or raises the carried PortalError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from portal.core.exceptions import PortalError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[PortalError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: PortalError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value
