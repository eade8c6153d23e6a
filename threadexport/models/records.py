"""
Thread data models for Threadexport.

This module defines the typed structures the importers convert Reddit's
listing JSON into, and the flat Comment Record rows the rest of the
pipeline works on.
"""

from typing import List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, Field


DELETED = "[deleted]"


class MoreStub(BaseModel):
    """
    A "load more comments" placeholder from the listing.

    Stubs carry no comment data; the flattener skips them without
    consuming a sibling number.
    """

    kind: Literal["more"] = "more"

    count: int = Field(
        default=0,
        description="Number of comments hidden behind the stub, as reported by Reddit"
    )

    children_ids: List[str] = Field(
        default_factory=list,
        description="Ids of the comments the stub stands for"
    )


class CommentNode(BaseModel):
    """
    A real comment (Reddit kind ``t1``) with its nested replies.

    Fallback values are applied when the node is built, so consumers never
    see missing fields.
    """

    kind: Literal["t1"] = "t1"

    body: str = Field(
        default=DELETED,
        description="Comment text, '[deleted]' when absent"
    )

    author: str = Field(
        default=DELETED,
        description="Author name, '[deleted]' when absent"
    )

    upvotes: int = Field(default=0, description="Upvote count")

    downvotes: int = Field(default=0, description="Downvote count")

    score: int = Field(
        default=0,
        description="Reddit's score, or upvotes minus downvotes when not provided"
    )

    timestamp: Optional[float] = Field(
        default=None,
        description="Creation time in Unix epoch seconds (UTC)"
    )

    replies: List[Union["CommentNode", MoreStub]] = Field(
        default_factory=list,
        description="Direct replies in the order Reddit returned them"
    )


ThreadNode = Union[CommentNode, MoreStub]


class CommentRecord(BaseModel):
    """
    One row of the flat comment table.
    """

    numbering: str = Field(
        ...,
        description="Dot-joined sibling positions from the root, e.g. '2.1.1'"
    )

    level: int = Field(
        ...,
        description="Depth of the comment; top-level comments are level 1"
    )

    body: str = Field(default=DELETED)

    author: str = Field(default=DELETED)

    upvotes: int = Field(default=0)

    downvotes: int = Field(default=0)

    score: int = Field(default=0)

    timestamp: Optional[float] = Field(default=None)

    @property
    def path(self) -> Tuple[int, ...]:
        """Numbering as a tuple of ints."""
        return tuple(int(part) for part in self.numbering.split('.'))

    @property
    def parent_numbering(self) -> Optional[str]:
        """Numbering of the parent comment, or None for top-level comments."""
        if '.' not in self.numbering:
            return None
        return self.numbering.rsplit('.', 1)[0]


class PostRecord(BaseModel):
    """
    The submission a thread belongs to. Not part of the flat sequence.
    """

    title: str = Field(default="")

    selftext: str = Field(default="", description="Body text of a self post")

    author: str = Field(default=DELETED)

    permalink: str = Field(default="", description="Path relative to https://www.reddit.com")

    upvotes: int = Field(default=0)

    downvotes: int = Field(default=0)

    score: int = Field(default=0)

    timestamp: Optional[float] = Field(default=None)

    @property
    def url(self) -> str:
        """Absolute link to the post."""
        return f"https://www.reddit.com{self.permalink}"


# Enable forward references for self-referencing model
CommentNode.model_rebuild()
