from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .errors import require
from .option import NONE, Option, from_nullable

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")


class Result(Generic[E, A]):
    def is_ok(self) -> bool: raise NotImplementedError
    def is_err(self) -> bool: return not self.is_ok()

    def map(self, f: Callable[[A], B]) -> "Result[E, B]":
        require(f, "mapper")
        if self.is_ok():
            return Ok(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_err(self, f: Callable[[E], B]) -> "Result[B, A]":
        require(f, "mapper")
        if self.is_err():
            return Err(f(self.error))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def and_then(self, f: Callable[[A], "Result[E, B]"]) -> "Result[E, B]":
        require(f, "mapper")
        if self.is_ok():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_ok() else default  # type: ignore[attr-defined]

    def ok(self) -> Option[A]:
        return from_nullable(self.value) if self.is_ok() else NONE  # type: ignore[attr-defined]

    def err(self) -> Option[E]:
        return from_nullable(self.error) if self.is_err() else NONE  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Ok(Result[E, A]):
    value: A
    def is_ok(self) -> bool: return True


@dataclass(frozen=True)
class Err(Result[E, A]):
    error: E
    def is_ok(self) -> bool: return False


def from_option(option: Option[A], error: E) -> Result[E, A]:
    if option.is_some():
        return Ok(option.value)  # type: ignore[attr-defined]
    return Err(error)
