"""Data models for Threadexport."""

from .records import CommentNode, MoreStub, ThreadNode, CommentRecord, PostRecord, DELETED
from .hierarchy import HierarchyNode, ROOT_ID

__all__ = [
    "CommentNode",
    "MoreStub",
    "ThreadNode",
    "CommentRecord",
    "PostRecord",
    "DELETED",
    "HierarchyNode",
    "ROOT_ID"
]
