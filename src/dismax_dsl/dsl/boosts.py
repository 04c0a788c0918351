"""
Field Boost Parsing

Turns a list of field names plus an optional weight mapping into an ordered
list of field registrations.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldBoostSpec:
    """A field name paired with its boost (None = engine default)."""

    field_name: str
    boost: float | None = None

    def __post_init__(self):
        if not isinstance(self.field_name, str):
            raise TypeError(
                f"field_name must be a str, got {type(self.field_name).__name__}; "
                "pass weights with boosts={...}"
            )
        if not self.field_name:
            raise ValueError("field_name must not be empty")

    @property
    def has_explicit_boost(self) -> bool:
        return self.boost is not None


def parse_field_boosts(
    field_names: Iterable[str],
    boosts: Mapping[str, float] | None = None,
) -> list[FieldBoostSpec]:
    """
    Build field registrations from positional names and a weight mapping.

    Positional names come first with default boost, in the order given.
    Mapping entries follow in insertion order with their explicit boost.
    A name present in both places yields two specs; nothing is deduplicated.

    Args:
        field_names: Field names registered with default boost
        boosts: Optional mapping of field name to boost

    Returns:
        Ordered list of FieldBoostSpec
    """
    specs = [FieldBoostSpec(field_name) for field_name in field_names]
    if boosts:
        for field_name, boost in boosts.items():
            specs.append(FieldBoostSpec(field_name, float(boost)))
    return specs
