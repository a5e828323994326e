"""
Type definitions for jsontyped.

Provides a minimal Result type (Ok/Err), result-level helpers and the
JsonValue / Decoder aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, Union

if TYPE_CHECKING:
    from .errors import ParseError

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


Result = Union[Ok[T], Err[E]]

# Tree produced by json.loads
JsonValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]
DecodeResult = Union[Ok[T], Err["ParseError"]]
Decoder = Callable[[Any], DecodeResult[T]]


def map_err(f: Callable[[E], F], result: Ok[T] | Err[E]) -> Ok[T] | Err[F]:
    """
    Transform the error of a failed result, leaving success untouched.

    Usage:
        map_err(lambda e: Obj(NonEmpty.pure(("child", InvalidField(e)))), result)
    """
    if isinstance(result, Err):
        return Err(f(result.error))
    return result


def recover_with(default: T, result: Ok[T] | Err[E]) -> Ok[T]:
    """
    Replace any error with ``Ok(default)``; successes pass through.

    Operates on an already produced result, after decoding was attempted.
    """
    if isinstance(result, Err):
        return Ok(default)
    return result


def with_default(default: T, result: Ok[T] | Err[E]) -> T:
    """Unwrap a result, returning ``default`` on failure."""
    if isinstance(result, Ok):
        return result.value
    return default
