"""
Comment tree flattening.

Turns the nested comment tree into the flat, pre-ordered sequence of
CommentRecord rows used by the table, the sorter and the exporters.
"""

from typing import List, Optional, Sequence, Tuple

from ..models import CommentNode, CommentRecord, MoreStub, ThreadNode


def flatten_comments(
    nodes: Optional[Sequence[ThreadNode]],
    records: Optional[List[CommentRecord]] = None,
    prefix: Tuple[int, ...] = (),
) -> List[CommentRecord]:
    """
    Append one CommentRecord per real comment to ``records`` in pre-order.

    Siblings are numbered 1..N in arrival order. "More" stubs are skipped
    and do not consume a number, so the comment after a stub keeps the
    next free position.

    Args:
        nodes: Comments of one parent, in the order Reddit returned them
        records: List to append to; a new list is created when omitted
        prefix: Numbering path of the parent, empty for top-level comments

    Returns:
        The list the records were appended to
    """
    if records is None:
        records = []
    if not nodes:
        return records

    count = 0
    for node in nodes:
        if isinstance(node, MoreStub):
            continue

        count += 1
        path = prefix + (count,)
        records.append(_to_record(node, path))

        if node.replies:
            flatten_comments(node.replies, records, path)

    return records


def _to_record(node: CommentNode, path: Tuple[int, ...]) -> CommentRecord:
    return CommentRecord(
        numbering='.'.join(str(part) for part in path),
        level=len(path),
        body=node.body,
        author=node.author,
        upvotes=node.upvotes,
        downvotes=node.downvotes,
        score=node.score,
        timestamp=node.timestamp,
    )


def count_comments(nodes: Optional[Sequence[ThreadNode]]) -> int:
    """Count the real (non-stub) comments in a tree."""
    total = 0
    for node in nodes or []:
        if isinstance(node, CommentNode):
            total += 1 + count_comments(node.replies)
    return total
