"""Thread importers for various sources."""

from .base import BaseImporter
from .mock import MockImporter
from .reddit_json import RedditJSONImporter

__all__ = ["BaseImporter", "MockImporter", "RedditJSONImporter"]
