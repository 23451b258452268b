"""File mutation and revert.

Write order is what keeps a run recoverable:
    delete  - backup first, then the original
    revert  - original first, then remove the backup
A crash between the two steps always leaves a usable backup behind.
"""

from logsweep.config import SweepConfig
from logsweep.entries import EntrySource
from logsweep.exceptions import FileOperationError
from logsweep.path_filter import from_backup, to_backup
from logsweep.scanner import FileEditResult, remove_matches
from logsweep.utils.logging import logger


def read_file(path: str, source: EntrySource) -> bytes:
    try:
        return source.read_bytes(path)
    except OSError as e:
        raise FileOperationError(path, "reading file", e) from e


def apply_removal(path: str, source: EntrySource, config: SweepConfig) -> FileEditResult:
    """Strip target calls from one file, keeping a backup of the original.

    Nothing is written when the file has no match.

    Raises:
        FileOperationError: If reading, writing the backup or writing the
            file fails. A failed backup write leaves the original untouched.
    """
    content = read_file(path, source)
    result = remove_matches(content, config)
    if not result.changed:
        return result

    backup_path = to_backup(path, config)
    try:
        source.write_bytes(backup_path, content)
    except OSError as e:
        raise FileOperationError(backup_path, "creating backup file", e) from e

    try:
        source.write_bytes(path, result.content)
    except OSError as e:
        raise FileOperationError(path, "writing file", e) from e

    logger.debug(
        "Removed {count} statement(s) ({lines} lines) from {path}",
        count=result.removed_statements,
        lines=result.removed_lines,
        path=path,
    )
    return result


def revert_backup(backup_path: str, source: EntrySource, config: SweepConfig) -> str:
    """Restore the original file from its backup, then delete the backup.

    Returns:
        The restored original path

    Raises:
        BackupPathError: If backup_path lacks the backup suffix
        FileOperationError: If any step fails. The backup is only removed
            after the original has been written.
    """
    original_path = from_backup(backup_path, config)

    try:
        content = source.read_bytes(backup_path)
    except OSError as e:
        raise FileOperationError(backup_path, "reading backup file", e) from e

    try:
        source.write_bytes(original_path, content)
    except OSError as e:
        raise FileOperationError(original_path, "writing original file", e) from e

    try:
        source.remove(backup_path)
    except OSError as e:
        raise FileOperationError(backup_path, "removing backup file", e) from e

    logger.debug("Restored {path} ({size} bytes)", path=original_path, size=len(content))
    return original_path
