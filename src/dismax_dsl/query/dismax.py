"""
Dismax Query

Accumulates a fulltext query configuration and renders it as the flat
parameter set understood by a dismax query handler.
"""

import logging
from typing import Any

from dismax_dsl.core.config import settings
from dismax_dsl.core.utils import format_boost
from dismax_dsl.dsl.boosts import FieldBoostSpec
from dismax_dsl.models.highlight import HighlightOptions
from dismax_dsl.query.boost import ROOT, BoostArena
from dismax_dsl.query.restriction import Restriction

logger = logging.getLogger(__name__)


class DismaxQuery:
    """
    Fulltext query target backed by dismax parameters.

    Field registrations are kept as an ordered log. When a field is
    registered more than once, rendering uses the boost of the last
    registration at the position of the first one.
    """

    def __init__(self, keywords: str):
        self.keywords = keywords
        self.fulltext_fields: list[FieldBoostSpec] = []
        self.phrase_fields: list[FieldBoostSpec] = []
        self.highlight: HighlightOptions | None = None
        self.minimum_match: str | None = None
        self.tie: float | None = None
        self.phrase_slop: int | None = None
        self.query_phrase_slop: int | None = None
        self.boosts = BoostArena()

    def add_fulltext_field(self, field_name: str, boost: float | None = None) -> None:
        self.fulltext_fields.append(FieldBoostSpec(field_name, boost))

    def add_phrase_field(self, field_name: str, boost: float | None = None) -> None:
        self.phrase_fields.append(FieldBoostSpec(field_name, boost))

    def set_highlight(self, options: HighlightOptions) -> None:
        # Single slot: the latest options replace the previous ones.
        self.highlight = options

    def create_boost_query(self, factor: float, parent: int = ROOT) -> int:
        """Register a new boost branch and return its handle."""
        return self.boosts.allocate(factor, parent)

    def add_boost_restriction(self, handle: int, restriction: Restriction) -> None:
        self.boosts.add_restriction(handle, restriction)

    def set_minimum_match(self, minimum_match: int | str) -> None:
        self.minimum_match = str(minimum_match)

    def set_tie(self, tie: float) -> None:
        self.tie = float(tie)

    def set_phrase_slop(self, slop: int) -> None:
        self.phrase_slop = int(slop)

    def set_query_phrase_slop(self, slop: int) -> None:
        self.query_phrase_slop = int(slop)

    def to_params(self) -> dict[str, Any]:
        """
        Render the configuration as dismax parameters.

        Returns:
            Mapping of parameter name to value; ``bq`` is a list with one
            entry per top-level boost branch. Unset options are omitted.
        """
        params: dict[str, Any] = {"defType": settings.DEF_TYPE, "q": self.keywords}

        if self.fulltext_fields:
            params["qf"] = _render_fields(self.fulltext_fields)
        if self.phrase_fields:
            params["pf"] = _render_fields(self.phrase_fields)

        boost_queries = self.boosts.to_boolean_phrases()
        if boost_queries:
            params["bq"] = boost_queries

        if self.minimum_match is not None:
            params["mm"] = self.minimum_match
        if self.tie is not None:
            params["tie"] = format_boost(self.tie)
        if self.phrase_slop is not None:
            params["ps"] = str(self.phrase_slop)
        if self.query_phrase_slop is not None:
            params["qs"] = str(self.query_phrase_slop)

        if self.highlight is not None:
            params["hl"] = "on"
            params["hl.fl"] = settings.HIGHLIGHT_FIELDS
            params["hl.simple.pre"] = settings.HIGHLIGHT_PRE
            params["hl.simple.post"] = settings.HIGHLIGHT_POST
            params.update(self.highlight.to_params())

        logger.debug(f"Rendered dismax params for {self.keywords!r}: {params}")
        return params


def _render_fields(specs: list[FieldBoostSpec]) -> str:
    # dicts keep first-insertion order while updates overwrite the boost
    boosts: dict[str, float | None] = {}
    for spec in specs:
        boosts[spec.field_name] = spec.boost
    return " ".join(
        name if boost is None else f"{name}^{format_boost(boost)}"
        for name, boost in boosts.items()
    )
