"""Expansion state of category branches.

All functions here return new node objects and leave their input untouched,
so a caller can detect changes by identity. A category listed as its own
child is copied by reference instead of being walked again.
"""

from dataclasses import replace
from typing import Collection, List, Optional, Sequence, Set
from models.category import CategoryNode
from hierarchy.walk import rebuild


def toggle_expansion(forest: Sequence[CategoryNode], target_id: str) -> List[CategoryNode]:
    """Flip the expanded flag of one category.

    Args:
        forest: Current forest.
        target_id: Id of the category to open or close.

    Returns:
        A new forest where only the target's flag differs. An unknown id
        returns a forest equal to the input.
    """
    def flip(node: CategoryNode, children: Optional[List[CategoryNode]]) -> CategoryNode:
        if node.id == target_id:
            return replace(node, children=list(node.children), is_expanded=not node.is_expanded)
        return replace(node, children=children if children is not None else [])

    # The target's children are carried over, not walked
    return rebuild(forest, flip, descend=lambda node: node.id != target_id and node.has_children)


def expanded_ids(forest: Sequence[CategoryNode]) -> Set[str]:
    """Collect the ids of every expanded category in the forest."""
    ids: Set[str] = set()
    seen: Set[int] = set()
    stack = list(forest)
    while stack:
        node = stack.pop()
        if id(node.record) in seen:
            continue
        seen.add(id(node.record))
        if node.is_expanded:
            ids.add(node.id)
        stack.extend(node.children)
    return ids


def restore_expansion(
    forest: Sequence[CategoryNode], ids: Collection[str]
) -> List[CategoryNode]:
    """Return a copy of the forest where exactly the given ids are expanded.

    Used to carry the user's open branches over a rebuild of the forest.
    """
    ids = frozenset(ids)
    return _apply(forest, lambda node: node.id in ids)


def set_all_expanded(forest: Sequence[CategoryNode], expanded: bool) -> List[CategoryNode]:
    """Return a copy of the forest with every branch opened or closed."""
    return _apply(forest, lambda node: expanded)


def _apply(forest, is_open) -> List[CategoryNode]:
    return rebuild(
        forest,
        lambda node, children: replace(node, children=children, is_expanded=is_open(node)),
    )
