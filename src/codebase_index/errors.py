"""
Error types raised by the indexer.

Every error a caller can act on derives from IndexerError so the tool
boundary can report it as a plain message. Anything else reaching the
boundary is an unexpected fault and gets logged with its traceback.
"""


class IndexerError(Exception):
    """Base class for errors reported back to the caller."""


class InvalidInputError(IndexerError, ValueError):
    """A required field is missing or malformed."""


class ProjectNotFoundError(IndexerError):
    """The scan target does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Path does not exist: {path}")
        self.path = path


class ProjectNotADirectoryError(IndexerError):
    """The scan target exists but is not a directory."""

    def __init__(self, path: str):
        super().__init__("Path must be a directory")
        self.path = path


class NotIndexedError(IndexerError):
    """A query was made against a path that has never been scanned."""

    def __init__(self, path: str):
        super().__init__(f"No index found for {path}. Scan the project first.")
        self.path = path
