"""Predicate matching over key records.

A predicate is either a callable taking a :class:`JWK` or a mapping of
member name to expected value. Mapping values may be :class:`Matcher`
instances or operator mappings such as ``{"$in": ["ES256", "RS256"]}``.
Members absent from a record only match operators that account for
absence (``$exists``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .exceptions import OperationError

if TYPE_CHECKING:
    from .jwk import JWK


class Matcher(ABC):
    @abstractmethod
    def matches(self, present: bool, value: Any) -> bool:
        """Test a record member; ``present`` is False when the member is unset."""


@dataclass(frozen=True)
class Equals(Matcher):
    expected: Any

    def matches(self, present: bool, value: Any) -> bool:
        return present and value == self.expected


@dataclass(frozen=True)
class OneOf(Matcher):
    options: tuple[Any, ...]

    def matches(self, present: bool, value: Any) -> bool:
        return present and any(value == option for option in self.options)


@dataclass(frozen=True)
class Contains(Matcher):
    item: Any

    def matches(self, present: bool, value: Any) -> bool:
        return present and isinstance(value, (list, tuple, set, frozenset)) and self.item in value


@dataclass(frozen=True)
class Exists(Matcher):
    expected: bool = True

    def matches(self, present: bool, value: Any) -> bool:
        return present is self.expected


@dataclass(frozen=True)
class AllOf(Matcher):
    matchers: tuple[Matcher, ...]

    def matches(self, present: bool, value: Any) -> bool:
        return all(m.matches(present, value) for m in self.matchers)


def _one_of(arg: Any) -> Matcher:
    if isinstance(arg, (str, bytes)) or not hasattr(arg, "__iter__"):
        raise OperationError("$in requires a collection")
    return OneOf(tuple(arg))


OPERATORS: dict[str, Callable[[Any], Matcher]] = {
    "$eq": Equals,
    "$in": _one_of,
    "$contains": Contains,
    "$exists": lambda arg: Exists(bool(arg)),
}


def register_operator(name: str, factory: Callable[[Any], Matcher]) -> None:
    """Make ``{name: arg}`` available in declarative predicates."""
    if not name.startswith("$"):
        raise ValueError("Operator names must start with '$'")
    OPERATORS[name] = factory


def to_matcher(value: Any) -> Matcher:
    if isinstance(value, Matcher):
        return value
    if isinstance(value, Mapping) and value and all(isinstance(k, str) and k.startswith("$") for k in value):
        matchers = []
        for op, arg in value.items():
            if op not in OPERATORS:
                raise OperationError(f"unknown operator {op}")
            matchers.append(OPERATORS[op](arg))
        return matchers[0] if len(matchers) == 1 else AllOf(tuple(matchers))
    return Equals(value)


def compile_predicate(predicate: Any) -> Callable[[JWK], bool]:
    """Return a record test for a callable or declarative predicate."""
    if isinstance(predicate, Mapping):
        matchers = {name: to_matcher(expected) for name, expected in predicate.items()}

        def match(key: JWK) -> bool:
            fields = key.to_dict()
            return all(m.matches(name in fields, fields.get(name)) for name, m in matchers.items())
        return match
    if callable(predicate):
        return predicate
    raise OperationError("invalid predicate")
