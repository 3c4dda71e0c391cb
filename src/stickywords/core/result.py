"""Typed Result container for explicit success/failure returns.

The word-card pipeline has two expected failure outcomes (no quote matched,
upstream service broke) that callers must tell apart. Rather than raising,
the pipeline returns a ``Result[WordCard, CardError]`` and lets the API and
CLI layers decide how to present each branch.

Example
-------
>>> from stickywords.core.result import ok, err, Result
>>> def first_term(terms: list[str]) -> Result[str, str]:
...     return ok(terms[0]) if terms else err("no terms")
>>> first_term(["jazz"]).map(str.upper).unwrap()
'JAZZ'
>>> first_term([]).unwrap(default="drama")
'drama'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")

_MISSING: Any = object()


class Result(ABC, Generic[T, E]):
    """Either :class:`Ok` or :class:`Err`; each subclass implements the branches."""

    @abstractmethod
    def is_ok(self) -> bool: ...

    def is_err(self) -> bool:
        return not self.is_ok()

    @abstractmethod
    def unwrap(self, default: T = _MISSING) -> T:
        """Return the success value; on ``Err`` return ``default`` or raise."""

    @abstractmethod
    def unwrap_err(self) -> E: ...

    @abstractmethod
    def map(self, fn: Callable[[T], U]) -> Result[U, E]: ...

    @abstractmethod
    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]: ...


@dataclass(frozen=True, repr=False)
class Ok(Result[T, E]):
    """Successful result wrapping a value of type ``T``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self, default: T = _MISSING) -> T:
        return self.value

    def unwrap_err(self) -> E:
        raise RuntimeError(f"unwrap_err() called on {self!r}")

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        return Ok(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, repr=False)
class Err(Result[T, E]):
    """Failed result wrapping an error payload of type ``E``."""

    error: E

    def is_ok(self) -> bool:
        return False

    def unwrap(self, default: T = _MISSING) -> T:
        if default is _MISSING:
            raise RuntimeError(f"unwrap() called on {self!r}")
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        return Err(self.error)

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        return Err(fn(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


def ok(value: T) -> Result[T, E]:
    """Construct :class:`Ok` typed as the ``Result`` base."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Construct :class:`Err` typed as the ``Result`` base."""
    return Err(error)


__all__ = ["Err", "Ok", "Result", "err", "ok"]
