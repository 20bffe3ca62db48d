"""Specification pattern – composable boolean rules.

Rules combine with ``&``, ``|`` and ``~`` and keep their structure, so a
composite can be evaluated and also rendered back for diagnostics::

    rule = ApprovalIn(APPROVED) & ~StatusIn(INACTIVE, HOLD)
    rule.is_satisfied_by(event)
    rule.describe()   # "(approval in {APPROVED} AND NOT (status in {HOLD, INACTIVE}))"
"""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

T = TypeVar("T")


class Specification(abc.ABC, Generic[T]):
    """Abstract base; subclasses implement ``is_satisfied_by`` and ``describe``."""

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    @abc.abstractmethod
    def describe(self) -> str: ...

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "OrSpecification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        return NotSpecification(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


class AndSpecification(Specification[T]):
    """Conjunction of two specifications."""

    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)

    def describe(self) -> str:
        return f"({self._left.describe()} AND {self._right.describe()})"


class OrSpecification(Specification[T]):
    """Disjunction of two specifications."""

    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) or self._right.is_satisfied_by(candidate)

    def describe(self) -> str:
        return f"({self._left.describe()} OR {self._right.describe()})"


class NotSpecification(Specification[T]):
    """Negation of a specification."""

    def __init__(self, spec: Specification[T]) -> None:
        self._spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._spec.is_satisfied_by(candidate)

    def describe(self) -> str:
        return f"NOT ({self._spec.describe()})"


__all__ = [
    "AndSpecification",
    "NotSpecification",
    "OrSpecification",
    "Specification",
]
