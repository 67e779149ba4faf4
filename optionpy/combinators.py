"""Free-function form of the ``Option`` combinators.

Each function takes the option as its first argument and delegates to the
method of the same name, so ``map(opt, f)`` and ``opt.map(f)`` are
interchangeable. ``is_some``, ``is_none`` and ``get_value_or_default`` also
accept plain values, which are never treated as an ``Option``.
"""
from __future__ import annotations
from typing import Any, Callable, Iterable, List, Optional, TypeVar, Union

from .errors import InvalidArgument, require
from .logger import ConsoleLogger
from .option import NONE, Option, Some, empty, from_nullable, of, to_option
from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

__all__ = [
    "from_nullable", "to_option", "of", "empty",
    "is_some", "is_none",
    "get", "or_else", "or_else_get", "or_else_throw", "get_value_or_default",
    "map", "flat_map", "filter", "if_", "if_else", "or_",
    "if_present", "do", "match",
    "cast", "safe_cast",
    "ok_or", "trace",
    "sequence", "first_some", "flatten",
]


def is_some(value: Any) -> bool:
    return isinstance(value, Option) and value.is_some()


def is_none(value: Any) -> bool:
    return isinstance(value, Option) and value.is_none()


def get(option: Option[T]) -> T: return option.get()
def or_else(option: Option[T], default: U) -> Union[T, U]: return option.or_else(default)
def or_else_get(option: Option[T], supplier: Callable[[], U]) -> Union[T, U]: return option.or_else_get(supplier)
def or_else_throw(option: Option[T], error_supplier: Callable[[], BaseException]) -> T: return option.or_else_throw(error_supplier)


def get_value_or_default(value: Any, default: Any = None) -> Any:
    """Unwrap ``value`` if it is an option, otherwise return it as is.

    ``None`` and ``NONE`` both yield ``default``.
    """
    if isinstance(value, Option):
        return value.get_value_or_default(default)
    return default if value is None else value


def map(option: Option[T], f: Callable[[T], Optional[U]]) -> Option[U]: return option.map(f)
def flat_map(option: Option[T], f: Callable[[T], Option[U]]) -> Option[U]: return option.flat_map(f)
def filter(option: Option[T], predicate: Callable[[T], bool]) -> Option[T]: return option.filter(predicate)
def if_(option: Option[T], condition: Union[bool, Callable[[T], bool]]) -> Option[T]: return option.if_(condition)


def if_else(option: Option[T], some_fn: Callable[[T], Optional[U]], none_value: Optional[U] = None) -> Option[U]:
    return option.if_else(some_fn, none_value)


def or_(option: Option[T], other: Option[T]) -> Option[T]: return option.or_(other)


def if_present(option: Option[T], action: Callable[[T], Any]) -> None: option.if_present(action)


do = if_present


def match(option: Option[T], some_fn: Callable[[T], U], none_value: Optional[U] = None) -> Optional[U]:
    return option.match(some_fn, none_value)


def cast(option: Option[Any], target: type) -> Option[Any]: return option.cast(target)
def safe_cast(option: Option[Any], target: type) -> Option[Any]: return option.safe_cast(target)
def ok_or(option: Option[T], error: E) -> Result[E, T]: return option.ok_or(error)


def trace(option: Option[T], label: str = "option", logger: Optional[ConsoleLogger] = None) -> Option[T]:
    """Log ``option`` at DEBUG and hand it back, for peeking into a chain."""
    require(option, "option")
    log = logger if logger is not None else ConsoleLogger("optionpy", level="DEBUG")
    log.debug(f"{label}: {option}", some=option.is_some())
    return option


def sequence(options: Iterable[Optional[Option[T]]]) -> Option[List[T]]:
    """``Some`` of all the values, or ``NONE`` as soon as one is missing."""
    values: List[T] = []
    for o in _items(options):
        if o.is_none():
            return NONE
        values.append(o.value)  # type: ignore[attr-defined]
    return Some(values)


def first_some(options: Iterable[Optional[Option[T]]]) -> Option[T]:
    for o in _items(options):
        if o.is_some():
            return o
    return NONE


def flatten(options: Iterable[Optional[Option[T]]]) -> List[T]:
    return [v for o in _items(options) for v in o]


def _items(options: Iterable[Optional[Option[T]]]) -> Iterable[Option[T]]:
    # bare None items count as absent
    for o in options:
        if o is None:
            yield NONE
        elif isinstance(o, Option):
            yield o
        else:
            raise InvalidArgument(f"expected an Option, got {type(o).__name__}")
