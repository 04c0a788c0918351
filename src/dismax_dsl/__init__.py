"""Fluent builder for dismax fulltext query parameters."""

from dismax_dsl.dsl.boosts import FieldBoostSpec, parse_field_boosts
from dismax_dsl.models.highlight import HighlightOptions
from dismax_dsl.query.boost import ROOT, BoostArena, BoostNode
from dismax_dsl.query.dismax import DismaxQuery
from dismax_dsl.dsl.scope import RestrictionBuilder, Scope
from dismax_dsl.dsl.fulltext import FulltextBuilder, FulltextQueryTarget
from dismax_dsl.search import fulltext

__all__ = [
    "FieldBoostSpec",
    "parse_field_boosts",
    "HighlightOptions",
    "ROOT",
    "BoostArena",
    "BoostNode",
    "DismaxQuery",
    "RestrictionBuilder",
    "Scope",
    "FulltextBuilder",
    "FulltextQueryTarget",
    "fulltext",
]
