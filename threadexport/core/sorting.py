"""
Sorting of the flat comment sequence.

Sorting happens in place on the session's record list. The direction is a
single session-wide toggle that flips after every successful sort, whatever
the column.
"""

import logging
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Callable

from ..models import CommentRecord

if TYPE_CHECKING:
    from .session import ExportSession


NUMERIC_COLUMNS = ("upvotes", "downvotes", "level", "score")

# Column names used by the original web table
COLUMN_ALIASES = {"dateUtc": "timestamp"}


def compare_numbering(a: str, b: str) -> int:
    """
    Compare two dotted numbering strings segment by segment.

    Segments compare as integers and a missing segment counts as 0, so
    "2.9" < "2.10" and "2" < "2.1".

    Returns:
        -1, 0 or 1
    """
    parts_a = [int(part) for part in a.split('.')]
    parts_b = [int(part) for part in b.split('.')]

    for i in range(max(len(parts_a), len(parts_b))):
        value_a = parts_a[i] if i < len(parts_a) else 0
        value_b = parts_b[i] if i < len(parts_b) else 0
        if value_a < value_b:
            return -1
        if value_a > value_b:
            return 1
    return 0


def _sort_key(column: str) -> Callable[[CommentRecord], Any]:
    if column == "numbering":
        numbering_key = cmp_to_key(compare_numbering)
        return lambda record: numbering_key(record.numbering)
    if column == "timestamp":
        return lambda record: record.timestamp or 0
    if column in NUMERIC_COLUMNS:
        return lambda record: getattr(record, column)
    if column == "body":
        return lambda record: record.body.lower()
    return lambda record: str(getattr(record, column)).lower()


def is_sortable(column: str) -> bool:
    column = COLUMN_ALIASES.get(column, column)
    return column == "body" or column in CommentRecord.model_fields


def sort_records(session: "ExportSession", column: str) -> None:
    """
    Reorder ``session.records`` in place by ``column``.

    Does nothing, and leaves the direction untouched, when the session holds
    no records or the column is not a record field.
    """
    if not session.populated or not session.records:
        logging.debug("Sort ignored: no comments loaded")
        return
    if not is_sortable(column):
        logging.debug(f"Sort ignored: unknown column '{column}'")
        return

    column = COLUMN_ALIASES.get(column, column)
    # list.sort is stable in both directions, so ties keep their order
    session.records.sort(key=_sort_key(column), reverse=not session.sort_ascending)

    logging.debug(
        f"Sorted {len(session.records)} comments by {column} "
        f"({'ascending' if session.sort_ascending else 'descending'})"
    )
    session.sort_ascending = not session.sort_ascending
