"""
Fulltext Search Entry Point

Builds a dismax query from keywords and a configuration callback.
"""

from collections.abc import Callable

from dismax_dsl.dsl.fulltext import FulltextBuilder
from dismax_dsl.query.dismax import DismaxQuery


def fulltext(
    keywords: str,
    block: Callable[[FulltextBuilder], None] | None = None,
) -> DismaxQuery:
    """
    Build a fulltext query.

    Args:
        keywords: Keywords to search for
        block: Optional callback receiving a FulltextBuilder

    Returns:
        The configured DismaxQuery; call ``to_params()`` to render it.
    """
    if not keywords or not keywords.strip():
        raise ValueError("keywords must not be blank")
    query = DismaxQuery(keywords)
    if block is not None:
        block(FulltextBuilder(query))
    return query
