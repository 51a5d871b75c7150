"""Tests for hierarchies deeper than the interpreter's recursion limit."""

import sys

import pytest

from hierarchy import (
    build_tree,
    count_nodes,
    expanded_ids,
    filter_tree,
    render_tree,
    restore_expansion,
    set_all_expanded,
    toggle_expansion,
)
from tests.helpers import record

DEPTH = sys.getrecursionlimit() + 500


def _chain(depth=DEPTH):
    """Build a single chain 0 -> 1 -> ... -> depth-1."""
    records = [record("0", "Category 0")]
    records += [
        record(str(i), f"Category {i}", parent_id=str(i - 1)) for i in range(1, depth)
    ]
    return build_tree(records)


def _walk(forest):
    """Nodes of a single chain, top to bottom."""
    nodes = []
    node = forest[0] if forest else None
    while node is not None:
        nodes.append(node)
        node = node.children[0] if node.children else None
    return nodes


@pytest.fixture(scope="module")
def chain():
    return _chain()


class TestDeepHierarchy:
    """Each operation walks the whole chain without recursion errors."""

    def test_build(self, chain):
        nodes = _walk(chain)

        assert len(nodes) == DEPTH
        assert nodes[-1].id == str(DEPTH - 1)

    def test_filter_deepest(self, chain):
        """Test that a match at the bottom keeps and opens the whole chain."""
        last = DEPTH - 1

        nodes = _walk(filter_tree(chain, f"Category {last}"))

        assert len(nodes) == DEPTH
        assert all(node.is_expanded for node in nodes[:-1])
        assert nodes[-1].is_expanded is False

    def test_filter_no_match(self, chain):
        assert filter_tree(chain, "zzz") == []

    def test_toggle_deepest(self, chain):
        nodes = _walk(toggle_expansion(chain, str(DEPTH - 1)))

        assert len(nodes) == DEPTH
        assert nodes[-1].is_expanded is True
        assert not any(node.is_expanded for node in nodes[:-1])

    def test_expand_all_and_render(self, chain):
        opened = set_all_expanded(chain, True)

        lines = render_tree(opened, indent=1)

        assert len(lines) == DEPTH
        assert lines[-1] == " " * (DEPTH - 1) + f"· Category {DEPTH - 1} [Autre] (universal)"

    def test_overlay_round_trip(self, chain):
        opened = toggle_expansion(toggle_expansion(chain, "0"), str(DEPTH // 2))

        restored = restore_expansion(chain, expanded_ids(opened))

        assert expanded_ids(restored) == {"0", str(DEPTH // 2)}

    def test_count(self, chain):
        assert count_nodes(chain) == DEPTH
