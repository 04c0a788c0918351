"""
Fulltext DSL

Builder exposing the dismax fulltext options: weighted fields, phrase
fields, highlighting and attribute boost queries.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from dismax_dsl.dsl.boosts import parse_field_boosts
from dismax_dsl.dsl.scope import Scope
from dismax_dsl.models.highlight import HighlightOptions

logger = logging.getLogger(__name__)


class FulltextQueryTarget(Protocol):
    """Query object the builder writes its configuration into."""

    def add_fulltext_field(self, field_name: str, boost: float | None = None) -> None: ...

    def add_phrase_field(self, field_name: str, boost: float | None = None) -> None: ...

    def set_highlight(self, options: HighlightOptions) -> None: ...

    def create_boost_query(self, factor: float, parent: int = -1) -> int: ...

    def set_minimum_match(self, minimum_match: int | str) -> None: ...

    def set_tie(self, tie: float) -> None: ...

    def set_phrase_slop(self, slop: int) -> None: ...

    def set_query_phrase_slop(self, slop: int) -> None: ...

    # Used by Scope for predicates inside a boost block
    def add_boost_restriction(self, handle: int, restriction: Any) -> None: ...


class FulltextBuilder:
    """
    Declarative builder for the fulltext part of a search.

    Example:
        builder.fields("body", boosts={"title": 2.0})
        builder.phrase_fields(boosts={"title": 2.0})
        builder.highlight(max_snippets=3)
        builder.boost(2.0, lambda scope: scope.with_("featured", True))
    """

    def __init__(self, query: FulltextQueryTarget):
        self.query = query

    def fields(self, *field_names: str, boosts: Mapping[str, float] | None = None) -> None:
        """
        Specify which fields to search.

        Positional fields get the default boost; ``boosts`` maps further
        field names to explicit boosts. ``fields("body", boosts={"title": 2.0})``
        searches body with default boost and title with a boost of 2.0.
        """
        for spec in parse_field_boosts(field_names, boosts):
            logger.debug(f"Fulltext field {spec.field_name} (boost={spec.boost})")
            self.query.add_fulltext_field(spec.field_name, spec.boost)

    def phrase_fields(self, *field_names: str, boosts: Mapping[str, float] | None = None) -> None:
        """
        Give extra boost to documents where all keywords appear in close
        proximity in one of these fields. Arguments as for ``fields``.
        """
        for spec in parse_field_boosts(field_names, boosts):
            logger.debug(f"Phrase field {spec.field_name} (boost={spec.boost})")
            self.query.add_phrase_field(spec.field_name, spec.boost)

    def highlight(self, options: HighlightOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """
        Enable keyword highlighting.

        Accepts a HighlightOptions record, a mapping, or the same options as keywords:
        max_snippets, fragment_size, merge_continuous_fragments,
        phrase_highlighter and require_field_match. Any other option raises
        a ValidationError. A second call replaces the first.
        """
        if options is not None and kwargs:
            raise ValueError("Pass either a HighlightOptions record or keywords, not both")
        if options is None:
            options = HighlightOptions(**kwargs)
        else:
            options = HighlightOptions.model_validate(options)
        self.query.set_highlight(options)

    def boost(self, factor: float, block: Callable[[Scope], None]) -> None:
        """
        Give documents matching an attribute scope an extra boost.

        ``block`` receives a Scope whose predicates select the boosted
        documents and may nest further boosts. The branch is registered
        before ``block`` runs and stays registered if it raises.
        """
        handle = self.query.create_boost_query(factor)
        logger.debug(f"Evaluating boost {handle} (factor={factor})")
        try:
            block(Scope(self.query, handle))
        except Exception:
            logger.error(f"Boost block failed (factor={factor})", exc_info=True)
            raise

    def minimum_match(self, minimum_match: int | str) -> None:
        """Minimum number (or spec such as ``"75%"``) of clauses that must match."""
        self.query.set_minimum_match(minimum_match)

    def tie(self, tie: float) -> None:
        """Weight given to non-maximum field scores (0.0 = pure disjunction max)."""
        self.query.set_tie(tie)

    def phrase_slop(self, slop: int) -> None:
        """Term distance allowed for phrase field boosts."""
        self.query.set_phrase_slop(slop)

    def query_phrase_slop(self, slop: int) -> None:
        """Term distance allowed for phrases in the keywords themselves."""
        self.query.set_query_phrase_slop(slop)
