from __future__ import annotations
import types
import typing
from typing import Tuple


class OptionError(Exception):
    pass


class InvalidArgument(OptionError, ValueError):
    """A required argument (mapper, predicate, action, type) was missing."""


class IllegalState(OptionError, RuntimeError):
    """The option was asked for something its variant cannot provide."""


class InvalidCast(OptionError, TypeError):
    def __init__(self, value: object, target: object):
        super().__init__(f"Cannot cast {type(value).__name__} to {_type_name(target)}")
        self.value = value
        self.target = target


def require(arg: object, name: str) -> None:
    if arg is None:
        raise InvalidArgument(f"{name} cannot be None")


_UNIONS = (typing.Union, types.UnionType)


def type_members(target: object) -> Tuple[object, ...]:
    """Flatten a cast target (type, tuple of types, or union) to its members."""
    if isinstance(target, tuple):
        return tuple(m for t in target for m in type_members(t))
    if typing.get_origin(target) in _UNIONS:
        return type_members(typing.get_args(target))
    return (target,)


def _type_name(target: object) -> str:
    return " | ".join(getattr(t, "__name__", repr(t)) for t in type_members(target))
