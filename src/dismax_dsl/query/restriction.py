"""
Attribute Restrictions

Predicates on attribute fields, rendered as Lucene boolean phrases for use
inside boost queries.
"""

from dataclasses import dataclass, field
from typing import Any

from dismax_dsl.core.utils import escape, solr_value


@dataclass
class Restriction:
    """Base class for a single field predicate."""

    field_name: str
    negated: bool = field(default=False, kw_only=True)

    def to_positive_boolean_phrase(self) -> str:
        raise NotImplementedError

    def to_boolean_phrase(self) -> str:
        phrase = self.to_positive_boolean_phrase()
        if self.negated:
            return f"-{phrase}"
        return phrase

    def _clause(self, value_phrase: str) -> str:
        return f"{escape(self.field_name)}:{value_phrase}"


@dataclass
class EqualTo(Restriction):
    """Field equals a value; a None value tests that the field is empty."""

    value: Any = None

    def to_positive_boolean_phrase(self) -> str:
        if self.value is None:
            return f"-{self._clause('[* TO *]')}"
        return self._clause(solr_value(self.value))

    def to_boolean_phrase(self) -> str:
        # A negated empty-test is an existence test.
        if self.value is None and self.negated:
            return self._clause("[* TO *]")
        return super().to_boolean_phrase()


@dataclass
class LessThan(Restriction):
    value: Any = None

    def to_positive_boolean_phrase(self) -> str:
        return self._clause(f"[* TO {solr_value(self.value)}]")


@dataclass
class GreaterThan(Restriction):
    value: Any = None

    def to_positive_boolean_phrase(self) -> str:
        return self._clause(f"[{solr_value(self.value)} TO *]")


@dataclass
class Between(Restriction):
    """Inclusive range between two values."""

    first: Any = None
    last: Any = None

    def to_positive_boolean_phrase(self) -> str:
        return self._clause(f"[{solr_value(self.first)} TO {solr_value(self.last)}]")


@dataclass
class AnyOf(Restriction):
    values: list[Any] = field(default_factory=list)

    def __post_init__(self):
        if not self.values:
            raise ValueError(f"{type(self).__name__} needs at least one value")

    def to_positive_boolean_phrase(self) -> str:
        joined = " OR ".join(solr_value(v) for v in self.values)
        return self._clause(f"({joined})")


@dataclass
class AllOf(Restriction):
    values: list[Any] = field(default_factory=list)

    def __post_init__(self):
        if not self.values:
            raise ValueError(f"{type(self).__name__} needs at least one value")

    def to_positive_boolean_phrase(self) -> str:
        joined = " AND ".join(solr_value(v) for v in self.values)
        return self._clause(f"({joined})")
