"""
Base importer interface for Threadexport.

This module defines the abstract interface that all thread importers must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import PostRecord, ThreadNode


class BaseImporter(ABC):
    """
    Abstract base class for all thread importers.

    Each importer converts a thread from a specific source (Reddit's JSON
    endpoint, a saved file, hardcoded test data) into a PostRecord and the
    typed comment tree.
    """

    @abstractmethod
    def get_post(self) -> PostRecord:
        """
        Retrieve the submission the thread belongs to.

        Returns:
            The PostRecord for the thread
        """
        pass

    @abstractmethod
    def get_comments(self) -> List[ThreadNode]:
        """
        Retrieve the top-level comment listing.

        Returns:
            Comment nodes and "more" stubs in the order the source lists them
        """
        pass
