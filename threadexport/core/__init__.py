"""Comment tree transformation pipeline."""

from .dates import format_date
from .flattener import flatten_comments, count_comments
from .sorting import compare_numbering, sort_records
from .hierarchy import build_hierarchy, make_snippet, TreeViewState
from .session import ExportSession, ExportPreferences

__all__ = [
    "format_date",
    "flatten_comments",
    "count_comments",
    "compare_numbering",
    "sort_records",
    "build_hierarchy",
    "make_snippet",
    "TreeViewState",
    "ExportSession",
    "ExportPreferences"
]
