"""Exceptions raised by logsweep.

Per-file failures carry the path and the operation that failed so the
walker can report them and move on to the next entry.
"""


class SweepError(Exception):
    """Base class for logsweep failures."""


class BackupPathError(SweepError, ValueError):
    """Raised when a path expected to be a backup lacks the backup suffix."""

    def __init__(self, path: str, suffix: str):
        super().__init__(f"not a backup path (missing '{suffix}'): {path}")
        self.path = path
        self.suffix = suffix


class FileOperationError(SweepError):
    """Raised when reading, writing or removing one file fails.

    Attributes:
        path: File the operation targeted
        operation: Short verb describing the step ("reading", "creating backup", ...)
    """

    def __init__(self, path: str, operation: str, cause: OSError | None = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"error {operation} {path}{detail}")
        self.path = path
        self.operation = operation
        self.cause = cause


class TraversalError(SweepError):
    """Raised when the walk root itself cannot be traversed."""

    def __init__(self, root: str, reason: str):
        super().__init__(f"{root}: {reason}")
        self.root = root
        self.reason = reason
