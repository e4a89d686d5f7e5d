"""Build navigation trees from flat menu item rows.

Items reference their parent through ``parent_id``. The rows are indexed
by id, each one is hung under its parent, and the forest is then walked
from the roots with an explicit stack. Items that cannot be reached from
a root (their parent is missing, or their ancestry loops back on
itself) are returned separately instead of being placed in the tree.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass
class TreeNode:
    item: Any
    children: list["TreeNode"] = field(default_factory=list)


@dataclass
class MenuTree:
    roots: list[TreeNode]
    # Items not reachable from a root
    detached: list[Any] = field(default_factory=list)

    @property
    def detached_ids(self) -> list[int]:
        return [item.id for item in self.detached]

    def walk(self) -> Iterable[tuple[TreeNode, int]]:
        """Yield ``(node, depth)`` in display order."""
        stack = [(node, 0) for node in reversed(self.roots)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            stack.extend((child, depth + 1) for child in reversed(node.children))


def build_menu_tree(items: list[Any]) -> MenuTree:
    """Arrange ``items`` (objects with ``id`` and ``parent_id``) into a forest.

    Siblings keep the order they have in ``items``, so pass the rows
    already sorted by ``order``.
    """
    nodes = {item.id: TreeNode(item) for item in items}
    roots: list[TreeNode] = []

    for item in items:
        node = nodes[item.id]
        if item.parent_id is None:
            roots.append(node)
        elif item.parent_id != item.id and item.parent_id in nodes:
            nodes[item.parent_id].children.append(node)

    reached: set[int] = set()
    stack = list(roots)
    while stack:
        node = stack.pop()
        if node.item.id in reached:
            continue
        reached.add(node.item.id)
        stack.extend(node.children)

    detached = [item for item in items if item.id not in reached]
    return MenuTree(roots=roots, detached=detached)


def descendant_ids(items: list[Any], root_id: int) -> set[int]:
    """Ids of every item below ``root_id`` (not including it)."""
    children = defaultdict(list)
    for item in items:
        if item.parent_id is not None:
            children[item.parent_id].append(item.id)

    found: set[int] = set()
    stack = list(children[root_id])
    while stack:
        item_id = stack.pop()
        if item_id in found or item_id == root_id:
            continue
        found.add(item_id)
        stack.extend(children[item_id])
    return found
