"""Builds the subcategory hierarchy from a flat list."""

from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Set

from models.category_tree import CategoryTreeNode
from models.subcategory import Subcategory
from logger import get_logger

logger = get_logger()


def build_tree(subcategories: Sequence[Subcategory]) -> List[CategoryTreeNode]:
    """Arrange subcategories into a forest using their parent_id references.

    Siblings are ordered by display_order; equal orders keep their input
    order. A node only gets children when it has at least one.

    Subcategories whose parent chain never reaches a root (missing parent or
    a parent_id cycle) cannot be reached and are left out.

    Args:
        subcategories: Flat list of subcategories.

    Returns:
        Root nodes, with descendants nested under them.
    """
    by_parent: Dict[Optional[str], List[Subcategory]] = defaultdict(list)
    for subcategory in subcategories:
        by_parent[subcategory.parent_id].append(subcategory)

    visited: Set[str] = set()
    tree = _build_level(by_parent, None, visited)

    unreachable = sum(1 for s in subcategories if s.id not in visited)
    if unreachable:
        logger.warning(
            f"{unreachable} subcategories are not reachable from a root and were left out"
        )

    return tree


def _build_level(
    by_parent: Dict[Optional[str], List[Subcategory]],
    parent_id: Optional[str],
    visited: Set[str],
) -> List[CategoryTreeNode]:
    nodes = []
    # sorted() is stable, so equal display orders keep input order
    for subcategory in sorted(
        by_parent.get(parent_id, []), key=lambda s: s.display_order
    ):
        if subcategory.id in visited:
            continue
        visited.add(subcategory.id)

        node = CategoryTreeNode.from_subcategory(subcategory)
        children = _build_level(by_parent, subcategory.id, visited)
        if children:
            node.children = children
        nodes.append(node)
    return nodes
