"""
Hierarchy rebuilding for the tree visualization.

The numbering of each flat record encodes its full ancestor path, so the
tree can be rebuilt from the records alone, in whatever order the table is
currently sorted.
"""

import logging
from typing import Dict, Iterable, List, Set

from ..models import CommentRecord, HierarchyNode, DELETED, ROOT_ID


SNIPPET_LENGTH = 80
ELLIPSIS = "..."


def make_snippet(body: str, length: int = SNIPPET_LENGTH) -> str:
    """Truncate a comment body for display."""
    if body == DELETED:
        return body
    if len(body) > length:
        return body[:length] + ELLIPSIS
    return body


def parent_id_for(numbering: str) -> str:
    """Numbering with its last segment stripped, or 'root' for top-level comments."""
    if '.' not in numbering:
        return ROOT_ID
    return numbering.rsplit('.', 1)[0]


def build_hierarchy(records: Iterable[CommentRecord], root_name: str = "") -> HierarchyNode:
    """
    Rebuild the comment tree from flat records.

    Children appear in the order their records appear in ``records``.
    A record whose parent is missing from the input is left out of the tree.

    Args:
        records: Flat comment records in any order
        root_name: Label for the root node, normally the post title

    Returns:
        The root HierarchyNode with counts filled in
    """
    root = HierarchyNode(id=ROOT_ID, parent_id=None, name=root_name, snippet=root_name)
    records = list(records)

    lookup: Dict[str, HierarchyNode] = {}
    for record in records:
        snippet = make_snippet(record.body)
        lookup[record.numbering] = HierarchyNode(
            id=record.numbering,
            parent_id=parent_id_for(record.numbering),
            name=snippet,
            score=record.score,
            snippet=snippet,
        )

    orphans = 0
    for record in records:
        node = lookup[record.numbering]
        if node.parent_id == ROOT_ID:
            root.children.append(node)
            continue
        parent = lookup.get(node.parent_id)
        if parent is None:
            orphans += 1
            continue
        parent.children.append(node)

    if orphans:
        logging.warning(f"Dropped {orphans} comments whose parent was not found")

    compute_counts(root)
    return root


def compute_counts(node: HierarchyNode) -> int:
    """
    Fill in ``count`` bottom-up.

    Leaves count 1; an internal node counts the sum of its children's
    counts without adding itself.
    """
    # Iterative post-order so deep threads do not hit the recursion limit
    order: List[HierarchyNode] = []
    stack = [node]
    while stack:
        current = stack.pop()
        order.append(current)
        stack.extend(current.children)

    for current in reversed(order):
        if current.children:
            current.count = sum(child.count for child in current.children)
        else:
            current.count = 1
    return node.count


class TreeViewState:
    """
    Expand/collapse state of a rendered hierarchy.

    The state is keyed by node id and belongs to the view, so it survives a
    rebuild of the tree as long as the numbering does.
    """

    def __init__(self):
        self.collapsed: Set[str] = set()

    def is_collapsed(self, node_id: str) -> bool:
        return node_id in self.collapsed

    def collapse(self, node_id: str) -> None:
        self.collapsed.add(node_id)

    def expand(self, node_id: str) -> None:
        self.collapsed.discard(node_id)

    def toggle(self, node_id: str) -> bool:
        """Flip a node and return True if it is now collapsed."""
        if node_id in self.collapsed:
            self.collapsed.discard(node_id)
            return False
        self.collapsed.add(node_id)
        return True

    def collapse_all(self, root: HierarchyNode) -> None:
        """Collapse every node that has children, except the root."""
        self.collapsed = {
            node.id for node in root.iter_nodes()
            if node.children and not node.is_root
        }

    def expand_all(self) -> None:
        self.collapsed.clear()

    def visible_nodes(self, root: HierarchyNode) -> List[HierarchyNode]:
        """Nodes a renderer should draw, in pre-order."""
        visible = []
        stack = [root]
        while stack:
            node = stack.pop()
            visible.append(node)
            if node.id not in self.collapsed:
                stack.extend(reversed(node.children))
        return visible

    def hidden_count(self, node: HierarchyNode) -> int:
        """Badge value for a collapsed node, 0 when nothing is hidden."""
        if node.children and node.id in self.collapsed:
            return node.count
        return 0
