from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar, Union

from .errors import IllegalState, InvalidArgument, InvalidCast, require, type_members

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Generic[T]):
    """Zero or one value of type ``T``.

    The two variants are ``Some(value)`` and the ``NONE`` singleton. Every
    combinator lives here once and dispatches on ``is_some()``; the variants
    only answer that question and hold the value.
    """

    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()
    def is_present(self) -> bool: return self.is_some()

    @staticmethod
    def of(value: T) -> "Option[T]": return of(value)
    @staticmethod
    def of_nullable(value: Optional[T]) -> "Option[T]": return from_nullable(value)
    @staticmethod
    def empty() -> "Option[Any]": return NONE

    # extraction

    def get(self) -> T:
        return self.value  # type: ignore[attr-defined]

    def or_else(self, default: U) -> Union[T, U]:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    def or_else_get(self, supplier: Callable[[], U]) -> Union[T, U]:
        require(supplier, "supplier")
        return self.value if self.is_some() else supplier()  # type: ignore[attr-defined]

    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> T:
        require(error_supplier, "error_supplier")
        if self.is_none():
            raise error_supplier()
        return self.value  # type: ignore[attr-defined]

    def get_value_or_default(self, default: Optional[U] = None) -> Union[T, U, None]:
        return self.or_else(default)

    # transformation

    def map(self, f: Callable[[T], Optional[U]]) -> "Option[U]":
        require(f, "mapper")
        if self.is_some():
            return from_nullable(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        require(f, "mapper")
        if self.is_none():
            return NONE
        result = f(self.value)  # type: ignore[attr-defined]
        if result is None:
            raise IllegalState("mapper result cannot be None")
        if not isinstance(result, Option):
            raise IllegalState(f"mapper must return an Option, got {type(result).__name__}")
        return result

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        require(predicate, "predicate")
        if self.is_some() and predicate(self.value):  # type: ignore[attr-defined]
            return self
        return NONE

    def if_(self, condition: Union[bool, Callable[[T], bool]]) -> "Option[T]":
        """``filter`` that also takes a plain condition, judged by its truthiness."""
        require(condition, "condition")
        if callable(condition):
            return self.filter(condition)
        return self if self.is_some() and condition else NONE

    def if_else(self, some_fn: Callable[[T], Optional[U]], none_value: Optional[U] = None) -> "Option[U]":
        require(some_fn, "some_fn")
        if self.is_some():
            return from_nullable(some_fn(self.value))  # type: ignore[attr-defined]
        return from_nullable(none_value)

    def or_(self, other: "Option[T]") -> "Option[T]":
        return self if self.is_some() else other

    # inspection

    def if_present(self, action: Callable[[T], Any]) -> None:
        require(action, "action")
        if self.is_some():
            action(self.value)  # type: ignore[attr-defined]

    do = if_present

    def match(self, some_fn: Callable[[T], U], none_value: Optional[U] = None) -> Optional[U]:
        require(some_fn, "some_fn")
        return some_fn(self.value) if self.is_some() else none_value  # type: ignore[attr-defined]

    # narrowing

    def cast(self, target: Any) -> "Option[Any]":
        types = _check_target(target)
        if self.is_none():
            return NONE
        if not isinstance(self.value, types):  # type: ignore[attr-defined]
            raise InvalidCast(self.value, target)  # type: ignore[attr-defined]
        return self

    def safe_cast(self, target: Any) -> "Option[Any]":
        types = _check_target(target)
        if self.is_some() and isinstance(self.value, types):  # type: ignore[attr-defined]
            return self
        return NONE

    # conversion

    def ok_or(self, error: E) -> "Result[E, T]":
        from .result import from_option
        return from_option(self, error)

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.value  # type: ignore[attr-defined]


@dataclass(frozen=True, repr=False)
class Some(Option[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgument("Some cannot wrap None, use from_nullable")

    def is_some(self) -> bool: return True
    def __str__(self) -> str: return f"Option[{self.value}]"
    def __repr__(self) -> str: return f"Some({self.value!r})"


class _None(Option[Any]):
    __slots__ = ()
    _instance: Optional["_None"] = None

    def __new__(cls) -> "_None":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def value(self) -> Any:
        raise IllegalState("No value present")

    def is_some(self) -> bool: return False
    def __str__(self) -> str: return "Option.None"
    def __repr__(self) -> str: return "NONE"
    def __reduce__(self) -> str: return "NONE"


NONE: Option[Any] = _None()


def from_nullable(value: Optional[T]) -> Option[T]:
    return Some(value) if value is not None else NONE


to_option = from_nullable


def of(value: T) -> Option[T]:
    if value is None:
        raise InvalidArgument("value cannot be None")
    return Some(value)


def empty() -> Option[Any]:
    return NONE


def _check_target(target: object) -> Tuple[type, ...]:
    require(target, "target")
    types = type_members(target)
    if not types or not all(isinstance(t, type) for t in types):
        raise InvalidArgument(f"target must be a type, a union or a tuple of types, got {target!r}")
    return types  # type: ignore[return-value]
