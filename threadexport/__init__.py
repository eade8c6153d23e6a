"""
Threadexport: Reddit thread to table exporter.

Flattens a Reddit comment tree into a numbered, sortable table, exports it
as CSV or HTML, and rebuilds the hierarchy for tree visualization.
"""

__version__ = "0.1.0"
__author__ = "Threadexport Project"

# Import main components
from .models import CommentRecord, PostRecord, CommentNode, MoreStub, HierarchyNode
from .core import ExportSession, ExportPreferences, TreeViewState, format_date
from .importers import BaseImporter, MockImporter, RedditJSONImporter
from .client import RedditThreadClient
from .exceptions import ThreadExportError, MissingURLError, FetchError, NoDataError

__all__ = [
    "CommentRecord",
    "PostRecord",
    "CommentNode",
    "MoreStub",
    "HierarchyNode",
    "ExportSession",
    "ExportPreferences",
    "TreeViewState",
    "format_date",
    "BaseImporter",
    "MockImporter",
    "RedditJSONImporter",
    "RedditThreadClient",
    "ThreadExportError",
    "MissingURLError",
    "FetchError",
    "NoDataError"
]
