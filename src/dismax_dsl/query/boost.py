"""
Boost Query Arena

Boost queries form a tree: every branch adds its own factor-weighted score
when its attribute predicates match, and may contain child branches that
only score within the parent. Nodes live in a flat list and are addressed
by integer handle; the tree only ever grows.
"""

import logging
from dataclasses import dataclass, field

from dismax_dsl.core.utils import format_boost
from dismax_dsl.query.restriction import Restriction

logger = logging.getLogger(__name__)

ROOT = -1


@dataclass
class BoostNode:
    """One scoring branch of the boost tree."""

    factor: float
    parent: int = ROOT
    restrictions: list[Restriction] = field(default_factory=list)
    children: list[int] = field(default_factory=list)


class BoostArena:
    """Flat storage for boost nodes, indexed by handle."""

    def __init__(self):
        self._nodes: list[BoostNode] = []
        self._roots: list[int] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def allocate(self, factor: float, parent: int = ROOT) -> int:
        """Add a new branch under ``parent`` and return its handle."""
        if parent != ROOT:
            self.node(parent)
        handle = len(self._nodes)
        self._nodes.append(BoostNode(factor=float(factor), parent=parent))
        if parent == ROOT:
            self._roots.append(handle)
        else:
            self._nodes[parent].children.append(handle)
        logger.debug(f"Allocated boost node {handle} (factor={factor}, parent={parent})")
        return handle

    def node(self, handle: int) -> BoostNode:
        if not 0 <= handle < len(self._nodes):
            raise KeyError(f"Unknown boost handle: {handle}")
        return self._nodes[handle]

    def add_restriction(self, handle: int, restriction: Restriction) -> None:
        self.node(handle).restrictions.append(restriction)

    def roots(self) -> list[int]:
        return list(self._roots)

    def children(self, handle: int) -> list[int]:
        return list(self.node(handle).children)

    def to_boolean_phrases(self) -> list[str]:
        """Render every top-level branch as one boost query."""
        phrases = []
        for handle in self._roots:
            phrase = self.render(handle)
            if phrase is not None:
                phrases.append(phrase)
        return phrases

    def render(self, handle: int) -> str | None:
        """
        Render a branch as ``(clauses)^factor``.

        Predicates are required clauses, child branches are optional ones.
        Branches with nothing to match are skipped and return None.
        """
        node = self.node(handle)
        clauses = [r.to_boolean_phrase() for r in node.restrictions]
        child_phrases = [p for p in (self.render(c) for c in node.children) if p]

        if not clauses and not child_phrases:
            logger.debug(f"Skipping empty boost node {handle}")
            return None

        if len(clauses) == 1 and not child_phrases and not clauses[0].startswith("-"):
            body = clauses[0]
        else:
            required = [c if c.startswith("-") else f"+{c}" for c in clauses]
            if clauses and all(c.startswith("-") for c in clauses):
                # Purely prohibited clauses match nothing on their own.
                required.insert(0, "*:*")
            body = " ".join(required + child_phrases)

        return f"({body})^{format_boost(node.factor)}"
