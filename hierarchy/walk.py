"""Non-recursive post-order rebuild shared by the forest transforms."""

from typing import Callable, Iterator, List, Optional, Sequence, Tuple
from models.category import CategoryNode

# transform(node, children) -> new node or None to drop it.
# children is None when the node's children were not walked.
Transform = Callable[[CategoryNode, Optional[List[CategoryNode]]], Optional[CategoryNode]]

_DONE = object()


def is_self_loop(parent: Optional[CategoryNode], child: CategoryNode) -> bool:
    """True when ``child`` is ``parent`` listed under itself.

    ``build_tree`` only produces single-level loops: longer parent cycles
    never reach a root. Copies made by a transform share their record, so
    the check is on the record.
    """
    return parent is not None and child.record is parent.record


def rebuild(
    forest: Sequence[CategoryNode],
    transform: Transform,
    descend: Callable[[CategoryNode], bool] = lambda node: True,
    keep_loops: bool = True,
) -> List[CategoryNode]:
    """Rebuild a forest bottom-up with an explicit stack.

    Each visited node is passed to ``transform`` after its children, so the
    cost is one visit per node whatever the depth.

    Args:
        forest: Forest to rebuild.
        transform: Builds the output node from the input node and its
            rebuilt children.
        descend: Whether to walk a node's children.
        keep_loops: Keep a self-loop child as it is (True) or drop it.

    Returns:
        The rebuilt roots.
    """
    roots: List[CategoryNode] = []
    stack: List[Tuple[Optional[CategoryNode], Iterator[CategoryNode], List[CategoryNode]]] = [
        (None, iter(forest), roots)
    ]

    while stack:
        parent, pending, collected = stack[-1]
        child = next(pending, _DONE)

        if child is _DONE:
            stack.pop()
            if parent is not None:
                node = transform(parent, collected)
                if node is not None:
                    stack[-1][2].append(node)
            continue

        if is_self_loop(parent, child):
            if keep_loops:
                collected.append(child)
        elif descend(child):
            stack.append((child, iter(child.children), []))
        else:
            node = transform(child, None)
            if node is not None:
                collected.append(node)

    return roots
