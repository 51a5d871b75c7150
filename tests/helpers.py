"""Helper utilities for tests."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from models.category import CategoryNode, CategoryRecord


def write_export(path: Path, payload: Any) -> Path:
    """Write a category export, as YAML for .yaml/.yml paths and JSON otherwise.

    Args:
        path: Destination file.
        payload: Listing payload (list or {"items": [...]}).

    Returns:
        The path written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        if path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(payload, f, allow_unicode=True)
        else:
            json.dump(payload, f, ensure_ascii=False)
    return path


def record(
    id: str,
    name: Optional[str] = None,
    parent_id: Optional[str] = None,
    **fields,
) -> CategoryRecord:
    """Build a CategoryRecord with a default name."""
    return CategoryRecord(id=id, name=name or f"Category {id}", parent_id=parent_id, **fields)


def ids(nodes: List[CategoryNode]) -> List[str]:
    """Ids of a list of nodes."""
    return [node.id for node in nodes]


def find_node(forest: List[CategoryNode], category_id: str) -> Optional[CategoryNode]:
    """Depth-first search for a node by id (first match, no cycle handling)."""
    for node in forest:
        if node.id == category_id:
            return node
        found = find_node(node.children, category_id)
        if found is not None:
            return found
    return None


def flatten(forest: List[CategoryNode], depth: int = 0) -> List[Dict[str, Any]]:
    """Flatten a forest into comparable (id, depth, expanded, record) rows."""
    rows = []
    for node in forest:
        rows.append(
            {
                "id": node.id,
                "depth": depth,
                "is_expanded": node.is_expanded,
                "record": node.record,
            }
        )
        rows.extend(flatten(node.children, depth + 1))
    return rows
