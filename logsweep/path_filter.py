"""Path filtering and backup path derivation.

Pure functions - no filesystem access. Callers pass the SweepConfig built
at startup.
"""

import posixpath

from logsweep.config import SweepConfig
from logsweep.exceptions import BackupPathError


def normalize_path(path: str) -> str:
    """Return the path with forward-slash separators."""
    return path.replace("\\", "/")


def should_skip(path: str, config: SweepConfig) -> bool:
    """True if the normalized path contains any skip pattern as a literal substring."""
    normalized = normalize_path(path)
    return any(pattern in normalized for pattern in config.skip_patterns)


def is_relevant_extension(path: str, config: SweepConfig) -> bool:
    """True if the file has an allowed extension and is not a minified bundle."""
    if any(marker in path for marker in config.minified_markers):
        return False

    ext = posixpath.splitext(normalize_path(path))[1].lower()
    return ext in config.relevant_extensions


def is_backup(path: str, config: SweepConfig) -> bool:
    return path.endswith(config.backup_suffix)


def to_backup(path: str, config: SweepConfig) -> str:
    """Derive the backup path for an original file."""
    return path + config.backup_suffix


def from_backup(backup_path: str, config: SweepConfig) -> str:
    """Derive the original path from a backup path.

    Raises:
        BackupPathError: If backup_path does not end with the backup suffix
    """
    if not is_backup(backup_path, config):
        raise BackupPathError(backup_path, config.backup_suffix)
    return backup_path[: -len(config.backup_suffix)]
