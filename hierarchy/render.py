"""Text rendering of a category forest."""

from typing import List, Optional, Sequence, Tuple
from models.category import CategoryNode
from hierarchy.walk import is_self_loop

EXPANDED_MARKER = "▾"
COLLAPSED_MARKER = "▸"
LEAF_MARKER = "·"
CYCLE_MARKER = "↺"


def format_node(node: CategoryNode) -> str:
    """Format the headline of a single category.

    Example: ``▸ Fournisseurs [Fournisseur] (universal) - 2 sous-catégories``
    """
    if not node.has_children:
        marker = LEAF_MARKER
    elif node.is_expanded:
        marker = EXPANDED_MARKER
    else:
        marker = COLLAPSED_MARKER

    line = f"{marker} {node.name} [{node.record.label}]"
    if node.record.is_universal:
        line += " (universal)"
    if node.has_children:
        count = len(node.children)
        line += f" - {count} sous-catégorie{'s' if count > 1 else ''}"
    return line


def render_tree(forest: Sequence[CategoryNode], indent: int = 2) -> List[str]:
    """Render a forest as indented lines.

    Children are only shown under expanded categories, the same way the
    collapsible tree hides them. A category that appears inside its own
    subtree is printed once more with a cycle marker and not walked again.

    Args:
        forest: Forest to render, usually the filtered view.
        indent: Spaces per depth level.

    Returns:
        Lines without trailing newlines.
    """
    lines: List[str] = []
    stack: List[Tuple[CategoryNode, int, Optional[CategoryNode]]] = [
        (node, 0, None) for node in reversed(forest)
    ]

    while stack:
        node, depth, parent = stack.pop()
        pad = " " * (indent * depth)

        if is_self_loop(parent, node):
            lines.append(f"{pad}{CYCLE_MARKER} {node.name}")
            continue

        lines.append(pad + format_node(node))
        if node.record.description:
            lines.append(f"{pad}{' ' * (indent + 1)}{node.record.description}")
        if node.is_expanded and node.has_children:
            stack.extend((child, depth + 1, node) for child in reversed(node.children))

    return lines
