"""Explicit success/failure returns for document loading.

Document loading is the one place where TimeSieve expects bad input from the
outside world (missing files, malformed JSON, annotation that violates the
document model). Loaders return a `Result[T, E]` instead of raising, so the
CLI, the HTTP layer and the smoke script decide how to report the failure.

Example
-------
>>> from timesieve.core.result import ok, err, Result
>>> def parse_offset(x: str) -> Result[int, str]:
...     return ok(int(x)) if x.isdigit() else err(f"not an offset: {x!r}")
>>> parse_offset("x").map_err(lambda e: f"doc.json: {e}").unwrap_err()
"doc.json: not an offset: 'x'"
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


class Result(Generic[T, E]):
    """Either a loaded value (`Ok[T]`) or the reason it could not be loaded (`Err[E]`)."""

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Return the loaded value, raising ``RuntimeError`` on ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(f"Attempted to unwrap Err: {self!r}")

    def unwrap_err(self) -> E:
        """Return the failure reason, raising ``RuntimeError`` on ``Ok``."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"Attempted to unwrap_err on Ok: {self!r}")

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Rewrite the failure reason, e.g. to prefix the file it came from."""
        if isinstance(self, Err):
            return Err(fn(cast(Err[T, E], self).error))
        return cast(Result[T, F], self)


@dataclass(frozen=True)
class Ok(Result[T, E]):
    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    error: E


def ok(value: T) -> Result[T, E]:
    return Ok(value)


def err(error: E) -> Result[T, E]:
    return Err(error)
