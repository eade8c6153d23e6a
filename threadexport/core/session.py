"""
Export session state.

An ExportSession holds everything one export works on: the post, the flat
comment sequence, the user's display preferences and the sort direction.
Starting a new export resets it wholesale.
"""

import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from ..config import config, DATE_FORMATS
from ..models import CommentRecord, HierarchyNode, PostRecord, ThreadNode
from .flattener import flatten_comments
from .hierarchy import build_hierarchy
from .sorting import sort_records


class ExportPreferences(BaseModel):
    """
    Display options chosen by the user for an export.
    """

    date_format: str = Field(
        default="iso8601",
        description="One of 'iso8601', 'rfc1123' or 'utc'"
    )

    compact_mode: bool = Field(
        default=False,
        description="Two-column layout with author, date and score folded into the body"
    )

    remove_newlines: bool = Field(
        default=False,
        description="Collapse line breaks in comment bodies to single spaces"
    )

    @classmethod
    def from_config(cls) -> "ExportPreferences":
        """Preferences seeded from the export section of the configuration."""
        return cls(
            date_format=config.date_format,
            compact_mode=config.compact_mode,
            remove_newlines=config.remove_newlines,
        )


class ExportSession:
    """
    Holds the state of one export and the operations that act on it.
    """

    def __init__(self, preferences: Optional[ExportPreferences] = None):
        """
        Initialize an empty session.

        Args:
            preferences: Display options; defaults to the configured ones
        """
        self.preferences = preferences or ExportPreferences.from_config()
        if self.preferences.date_format not in DATE_FORMATS:
            logging.warning(f"Unrecognized date format '{self.preferences.date_format}'")
        self.records: List[CommentRecord] = []
        self.post: Optional[PostRecord] = None
        self.populated = False
        self.sort_ascending = True

    def reset(self) -> None:
        """Discard the current thread. The sort direction is kept."""
        self.records = []
        self.post = None
        self.populated = False

    def load(self, post: PostRecord, comments: Sequence[ThreadNode]) -> List[CommentRecord]:
        """
        Start a new export from a parsed thread.

        Args:
            post: The submission
            comments: Top-level comment listing

        Returns:
            The flat comment sequence
        """
        self.reset()
        self.post = post
        flatten_comments(comments, self.records)
        self.populated = True
        logging.info(f"Loaded '{post.title}' with {len(self.records)} comments")
        return self.records

    def sort(self, column: str) -> None:
        """Sort the table by a column, flipping direction on every call."""
        sort_records(self, column)

    def reset_sort_direction(self) -> None:
        self.sort_ascending = True

    def hierarchy(self) -> HierarchyNode:
        """Build a fresh visualization tree from the current records."""
        root_name = self.post.title if self.post else ""
        return build_hierarchy(self.records, root_name)

    @property
    def has_data(self) -> bool:
        return self.populated and bool(self.records)
