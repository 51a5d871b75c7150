"""Search filter over a category forest."""

from dataclasses import replace
from typing import List, Optional, Sequence, Set
from models.category import CategoryNode, CategoryRecord
from hierarchy.walk import rebuild


def _contains(value: Optional[str], needle: str) -> bool:
    return value is not None and needle in value.lower()


def matches(record: CategoryRecord, term: str) -> bool:
    """Check whether a category matches a search term.

    Case-insensitive substring match against the name, the entity category
    and the description. Missing optional fields never match.
    """
    needle = term.lower()
    return (
        needle in record.name.lower()
        or _contains(record.entity_category, needle)
        or _contains(record.description, needle)
    )


def filter_tree(forest: Sequence[CategoryNode], term: str) -> Sequence[CategoryNode]:
    """Restrict a forest to matching categories and their ancestors.

    A category is kept when it matches ``term`` or when one of its
    descendants does. Kept categories with kept children are forced open so
    the matches are visible; a category kept only for itself keeps its own
    expanded flag. The input forest is never modified.

    The term is used as given: no trimming, so a whitespace-only term is a
    real search.

    Args:
        forest: Forest to filter.
        term: Search term. An empty term returns ``forest`` itself.

    Returns:
        The filtered forest, empty when nothing matches.
    """
    if not term:
        return forest

    def keep(node: CategoryNode, children: List[CategoryNode]) -> Optional[CategoryNode]:
        if not (children or matches(node.record, term)):
            return None
        return replace(
            node,
            children=children,
            is_expanded=True if children else node.is_expanded,
        )

    # A category listed as its own child was already considered
    return rebuild(forest, keep, keep_loops=False)


def count_nodes(forest: Sequence[CategoryNode]) -> int:
    """Count the categories of a forest, each category once."""
    seen: Set[int] = set()
    stack = list(forest)
    while stack:
        node = stack.pop()
        if id(node.record) in seen:
            continue
        seen.add(id(node.record))
        stack.extend(node.children)
    return len(seen)
