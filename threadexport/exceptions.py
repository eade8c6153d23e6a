"""Exceptions raised by Threadexport."""


class ThreadExportError(Exception):
    """Base class for all Threadexport errors."""


class MissingURLError(ThreadExportError):
    """Raised when an export is started without a thread URL."""


class FetchError(ThreadExportError):
    """
    Raised when the thread JSON cannot be retrieved.

    Covers connection failures, HTTP error statuses, non-JSON bodies and
    responses that are empty or carry Reddit's ``error`` field. The export
    session is left untouched when this is raised.
    """


class NoDataError(ThreadExportError):
    """Raised when an export is requested before any thread was loaded."""
