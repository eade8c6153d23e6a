"""
Mock importer for testing Threadexport.

This module provides a hardcoded thread for exercising the pipeline
without network access.
"""

from typing import List

from ..models import CommentNode, MoreStub, PostRecord, ThreadNode
from .base import BaseImporter


class MockImporter(BaseImporter):
    """
    Mock importer that returns a small hardcoded thread.

    The thread has nested replies, a deleted comment, a multi-line body,
    a quoted body and "more" stubs at two depths.
    """

    def __init__(self):
        """Initialize the mock importer with test data."""
        self._post = self._create_test_post()
        self._comments = self._create_test_comments()

    def get_post(self) -> PostRecord:
        return self._post

    def get_comments(self) -> List[ThreadNode]:
        return self._comments

    def _create_test_post(self) -> PostRecord:
        return PostRecord(
            title="What is the best way to export a Reddit thread?",
            selftext="I want every comment in a spreadsheet.\nAny ideas?",
            author="thread_starter",
            permalink="/r/DataHoarder/comments/abc123/what_is_the_best_way/",
            upvotes=120,
            downvotes=0,
            score=120,
            timestamp=1741700000,
        )

    def _create_test_comments(self) -> List[ThreadNode]:
        comments: List[ThreadNode] = []

        # 1: a discussion with two replies, the second one answered
        comments.append(CommentNode(
            body="Append .json to the URL and parse it.",
            author="json_fan",
            upvotes=42,
            score=42,
            timestamp=1741703950,
            replies=[
                CommentNode(
                    body="That only gives you the first batch of comments.",
                    author="skeptic",
                    upvotes=10,
                    score=10,
                    timestamp=1741704000,
                ),
                CommentNode(
                    body='He said "hi"\nand then left.',
                    author="quoter",
                    upvotes=3,
                    score=3,
                    timestamp=1741704100,
                    replies=[
                        CommentNode(
                            body="Classic.",
                            author="json_fan",
                            upvotes=1,
                            score=1,
                            timestamp=1741704200,
                        ),
                        MoreStub(count=4, children_ids=["k1", "k2", "k3", "k4"]),
                    ],
                ),
            ],
        ))

        # 2: a deleted comment that still has a reply
        comments.append(CommentNode(
            upvotes=0,
            score=-2,
            timestamp=1741705000,
            replies=[
                CommentNode(
                    body="Why was this removed?",
                    author="curious",
                    upvotes=5,
                    score=5,
                    timestamp=1741705100,
                ),
            ],
        ))

        comments.append(MoreStub(count=12, children_ids=["m1", "m2"]))

        # 3: listed after the stub, still numbered 3
        comments.append(CommentNode(
            body="Use a spreadsheet import.",
            author="Zed",
            upvotes=7,
            score=7,
            timestamp=1741706000,
        ))

        return comments
