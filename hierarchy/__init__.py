"""Category hierarchy: tree building, expansion state and search."""

from hierarchy.builder import build_tree, detached_records
from hierarchy.expansion import (
    expanded_ids,
    restore_expansion,
    set_all_expanded,
    toggle_expansion,
)
from hierarchy.render import format_node, render_tree
from hierarchy.search import count_nodes, filter_tree, matches
from hierarchy.view import CategoryTreeView

__all__ = [
    "build_tree",
    "detached_records",
    "toggle_expansion",
    "expanded_ids",
    "restore_expansion",
    "set_all_expanded",
    "filter_tree",
    "matches",
    "count_nodes",
    "format_node",
    "render_tree",
    "CategoryTreeView",
]
