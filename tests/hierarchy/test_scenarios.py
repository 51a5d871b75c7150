"""End-to-end scenarios for build, toggle and search on small listings."""

from hierarchy import build_tree, filter_tree, toggle_expansion
from tests.helpers import ids, record


def _listing():
    return [
        record("1", "Fournisseurs", parent_id=None),
        record("2", "Fournisseurs IT", parent_id="1"),
        record("3", "Clients", parent_id=None),
    ]


def test_build_two_roots_with_child():
    forest = build_tree(_listing())

    assert ids(forest) == ["1", "3"]
    assert ids(forest[0].children) == ["2"]


def test_search_reveals_parent_and_drops_other_root():
    filtered = filter_tree(build_tree(_listing()), "IT")

    assert ids(filtered) == ["1"]
    assert filtered[0].is_expanded is True
    assert ids(filtered[0].children) == ["2"]


def test_toggle_from_default_state():
    forest = build_tree(_listing())

    toggled = toggle_expansion(forest, "1")

    assert toggled[0].is_expanded is True
    assert toggled[0].children[0].is_expanded is False
    assert toggled[1].is_expanded is False


def test_self_loop_is_root_and_own_child():
    forest = build_tree([record("x", "Loop", parent_id="x")])

    assert ids(forest) == ["x"]
    assert ids(forest[0].children) == ["x"]


def test_orphan_is_root():
    forest = build_tree([record("a", "Orphan", parent_id="missing")])

    assert ids(forest) == ["a"]


def test_search_without_match_is_empty():
    assert filter_tree(build_tree(_listing()), "zzz") == []
