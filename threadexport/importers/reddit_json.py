"""
Reddit JSON importer for Threadexport.

This module converts the two-element listing array returned by
``<thread url>.json`` into a PostRecord and a tree of CommentNode / MoreStub
objects. Fallback values are applied here, once.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..exceptions import FetchError
from ..models import CommentNode, MoreStub, PostRecord, ThreadNode, DELETED
from .base import BaseImporter


def _score(data: Dict[str, Any], ups: int, downs: int) -> int:
    score = data.get("score")
    if isinstance(score, (int, float)) and not isinstance(score, bool):
        return int(score)
    return ups - downs


def check_response(payload: Any) -> None:
    """
    Reject a response that is empty or carries Reddit's error field.

    Raises:
        FetchError: If the payload cannot be used
    """
    if not payload:
        raise FetchError("Could not retrieve data from Reddit. Please check the URL.")
    if isinstance(payload, dict) and payload.get("error"):
        raise FetchError(
            f"Reddit returned error {payload.get('error')}: {payload.get('message', 'unknown')}"
        )


def parse_post(data: Dict[str, Any]) -> PostRecord:
    """Build a PostRecord from the ``data`` of the link listing's first child."""
    ups = data.get("ups") or 0
    downs = data.get("downs") or 0
    return PostRecord(
        title=data.get("title") or "",
        selftext=data.get("selftext") or "",
        author=data.get("author") or DELETED,
        permalink=data.get("permalink") or "",
        upvotes=ups,
        downvotes=downs,
        score=_score(data, ups, downs),
        timestamp=data.get("created_utc") or None,
    )


def parse_comment_listing(children: Optional[List[Dict[str, Any]]]) -> List[ThreadNode]:
    """
    Convert the ``children`` of a comment listing into typed nodes.

    Args:
        children: Raw ``{"kind": ..., "data": ...}`` items, possibly None

    Returns:
        CommentNode and MoreStub objects in listing order
    """
    nodes: List[ThreadNode] = []
    for child in children or []:
        if child.get("kind") == "more":
            more_data = child.get("data") or {}
            nodes.append(MoreStub(
                count=more_data.get("count") or 0,
                children_ids=more_data.get("children") or [],
            ))
            continue
        nodes.append(_build_comment_tree(child["data"]))
    return nodes


def _build_comment_tree(data: Dict[str, Any]) -> CommentNode:
    ups = data.get("ups") or 0
    downs = data.get("downs") or 0

    # "replies" is an empty string when a comment has no answers
    replies = data.get("replies")
    reply_children = None
    if isinstance(replies, dict):
        reply_children = (replies.get("data") or {}).get("children")

    return CommentNode(
        body=data.get("body") or DELETED,
        author=data.get("author") or DELETED,
        upvotes=ups,
        downvotes=downs,
        score=_score(data, ups, downs),
        timestamp=data.get("created_utc") or None,
        replies=parse_comment_listing(reply_children),
    )


class RedditJSONImporter(BaseImporter):
    """
    Importer for an already decoded Reddit thread payload.
    """

    def __init__(self, payload: Any):
        """
        Initialize the importer.

        Args:
            payload: The decoded JSON array from the thread endpoint

        Raises:
            FetchError: If the payload is empty or an error response
        """
        check_response(payload)
        self.payload = payload
        self._post: Optional[PostRecord] = None
        self._comments: Optional[List[ThreadNode]] = None

    @classmethod
    def from_file(cls, path: str) -> "RedditJSONImporter":
        """Load a thread saved from the ``.json`` endpoint."""
        file_path = Path(path)
        with open(file_path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
        logging.info(f"Loaded thread JSON from {file_path}")
        return cls(payload)

    def get_post(self) -> PostRecord:
        if self._post is None:
            self._post = parse_post(self.payload[0]["data"]["children"][0]["data"])
        return self._post

    def get_comments(self) -> List[ThreadNode]:
        if self._comments is None:
            self._comments = parse_comment_listing(self.payload[1]["data"]["children"])
            logging.debug(f"Parsed {len(self._comments)} top-level comment nodes")
        return self._comments
