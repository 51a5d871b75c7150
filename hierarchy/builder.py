"""Build a category forest from a flat list of records."""

from typing import Dict, List, Sequence
from models.category import CategoryNode, CategoryRecord


def build_tree(records: Sequence[CategoryRecord]) -> List[CategoryNode]:
    """Build the category hierarchy from a flat list of records.

    Every record gets a fresh node. Nodes are then attached to their parent
    by id; records without a parent, and records whose parent is not in the
    list, become roots. Children keep the order of the input list.

    Malformed input never raises:
    - duplicate ids: the later record takes the lookup slot, the earlier one
      is not reachable from the result;
    - a record that names itself as parent is a root that lists itself
      among its children.

    Args:
        records: Category records, in listing order.

    Returns:
        Root nodes, in listing order. Every node starts collapsed.
    """
    nodes: Dict[str, CategoryNode] = {}
    for record in records:
        nodes[record.id] = CategoryNode(record=record, children=[], is_expanded=False)

    roots: List[CategoryNode] = []
    for node in nodes.values():
        if not node.parent_id:
            roots.append(node)
            continue

        parent = nodes.get(node.parent_id)
        if parent is node:
            # Self-reference: no other parent, so it is both a root and its own child
            roots.append(node)
            node.children.append(node)
        elif parent is not None:
            parent.children.append(node)
        else:
            # Orphan: parent not in this listing
            roots.append(node)

    return roots


def detached_records(
    records: Sequence[CategoryRecord], forest: Sequence[CategoryNode]
) -> List[CategoryRecord]:
    """Find records that cannot be reached from any root of ``forest``.

    This happens for earlier duplicates of an id and for categories whose
    parent chain loops back on itself without reaching a root.

    Returns:
        The unreachable records, in input order.
    """
    reachable = set()
    stack = list(forest)
    while stack:
        node = stack.pop()
        if id(node.record) in reachable:
            continue
        reachable.add(id(node.record))
        stack.extend(node.children)

    return [record for record in records if id(record) not in reachable]
