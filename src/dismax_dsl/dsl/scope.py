"""
Boost Scope DSL

Attribute predicates evaluated inside a ``boost`` block. Each scope is
backed by exactly one boost branch of a query; nested ``boost`` calls add
child branches to it.
"""

import logging
from collections.abc import Callable
from typing import Any

from dismax_dsl.query.restriction import (
    AllOf,
    AnyOf,
    Between,
    EqualTo,
    GreaterThan,
    LessThan,
    Restriction,
)

logger = logging.getLogger(__name__)

_MISSING = object()


class RestrictionBuilder:
    """Returned by ``with_(field)`` to pick the kind of predicate."""

    def __init__(self, scope: "Scope", field_name: str, negated: bool = False):
        self._scope = scope
        self._field_name = field_name
        self._negated = negated

    def _add(self, restriction: Restriction) -> None:
        self._scope.add_restriction(restriction)

    def equal_to(self, value: Any) -> None:
        self._add(EqualTo(self._field_name, value, negated=self._negated))

    def less_than(self, value: Any) -> None:
        self._add(LessThan(self._field_name, value, negated=self._negated))

    def greater_than(self, value: Any) -> None:
        self._add(GreaterThan(self._field_name, value, negated=self._negated))

    def between(self, first: Any, last: Any) -> None:
        self._add(Between(self._field_name, first, last, negated=self._negated))

    def any_of(self, values: list[Any]) -> None:
        self._add(AnyOf(self._field_name, list(values), negated=self._negated))

    def all_of(self, values: list[Any]) -> None:
        self._add(AllOf(self._field_name, list(values), negated=self._negated))


class Scope:
    """Predicate scope backed by one boost branch of ``query``."""

    def __init__(self, query: Any, handle: int):
        self.query = query
        self.handle = handle

    def add_restriction(self, restriction: Restriction) -> None:
        self.query.add_boost_restriction(self.handle, restriction)

    def with_(self, field_name: str, value: Any = _MISSING) -> RestrictionBuilder | None:
        """
        Restrict the scope to documents matching a field value.

        ``with_("featured", True)`` adds an equality predicate and a list,
        tuple or set value adds an any-of predicate. Called without a value
        it returns a RestrictionBuilder for ranges and other comparisons.
        """
        return self._restrict(field_name, value, negated=False)

    def without(self, field_name: str, value: Any = _MISSING) -> RestrictionBuilder | None:
        """Negated form of ``with_``."""
        return self._restrict(field_name, value, negated=True)

    def _restrict(self, field_name: str, value: Any, negated: bool) -> RestrictionBuilder | None:
        builder = RestrictionBuilder(self, field_name, negated)
        if value is _MISSING:
            return builder
        if isinstance(value, (list, tuple, set, frozenset)):
            builder.any_of(list(value))
        else:
            builder.equal_to(value)
        return None

    def boost(self, factor: float, block: Callable[["Scope"], None]) -> None:
        """Add a child boost branch scoped within this one."""
        handle = self.query.create_boost_query(factor, parent=self.handle)
        logger.debug(f"Evaluating nested boost {handle} under {self.handle}")
        block(Scope(self.query, handle))
