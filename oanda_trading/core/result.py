# oanda_trading/core/result.py
"""
Outcome of a request: ``Ok`` with the decoded value or ``Err`` with a tagged
``RequestError``. The request layer returns these instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class FailureKind(str, Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    NOT_FOUND = "not_found"
    DECODE = "decode"


@dataclass(frozen=True)
class RequestError:
    kind: FailureKind
    method: str
    path: str
    message: str
    status_code: Optional[int] = None
    body: Optional[str] = None

    def __str__(self):
        status = f" [{self.status_code}]" if self.status_code is not None else ""
        return f"{self.method} {self.path} failed ({self.kind.value}){status}: {self.message}"


class RequestFailed(Exception):
    """Raised by ``Err.unwrap()``."""

    def __init__(self, error: RequestError):
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err:
    error: RequestError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise RequestFailed(self.error)

    def unwrap_or(self, default):
        return default

    def map(self, fn) -> "Err":
        return self


Result = Union[Ok[T], Err]
