"""Directory walker - prunes, filters and dispatches files per run mode."""

from collections.abc import Callable
from enum import Enum
from typing import Any

import click

from logsweep.config import SweepConfig
from logsweep.entries import EntrySource, LocalEntrySource
from logsweep.exceptions import FileOperationError, SweepError, TraversalError
from logsweep.mutator import apply_removal, read_file, revert_backup
from logsweep.path_filter import is_backup, is_relevant_extension, should_skip, to_backup
from logsweep.scanner import find_matches
from logsweep.utils.logging import logger


class SweepMode(str, Enum):
    """What the walker does with each file it keeps."""

    REPORT = "report"
    REMOVE = "delete"
    REVERT = "revert"


class Walker:
    """Depth-first traversal of one root directory.

    Skip patterns and minified markers are matched against each entry's
    path relative to the root, so the location of the root itself never prunes the walk. Revert
    mode ignores both the skip list and the extension filter: backups are
    found wherever they are.
    """

    def __init__(self, root: str, config: SweepConfig,
                 source: EntrySource | None = None,
                 echo: Callable[[str], Any] = click.echo):
        """Initialize the walker.

        Args:
            root: Directory to walk
            config: Sweep configuration built at startup
            source: Filesystem capabilities (defaults to the real filesystem)
            echo: Where match/update/revert lines are printed
        """
        self.root = root
        self.config = config
        self.source = source or LocalEntrySource()
        self.echo = echo

        # Stats tracking
        self.stats = {
            "dirs_pruned": 0,
            "files_scanned": 0,
            "matches": 0,
            "files_updated": 0,
            "files_reverted": 0,
            "entries_skipped": 0,
            "errors": 0,
        }

    def walk(self, mode: SweepMode) -> dict[str, int]:
        """Walk the root in the given mode and return the stats.

        Raises:
            TraversalError: If the root is missing, not a directory, or
                cannot be listed
        """
        if not self.source.exists(self.root):
            raise TraversalError(self.root, "no such file or directory")
        if not self.source.is_dir(self.root):
            raise TraversalError(self.root, "not a directory")

        try:
            children = self.source.list_children(self.root)
        except OSError as e:
            raise TraversalError(self.root, str(e)) from e

        logger.debug("Walking {root} in {mode} mode", root=self.root, mode=mode.value)
        self._visit_children(self.root, "", children, mode)
        return self.stats

    def _visit_dir(self, path: str, relative: str, mode: SweepMode) -> None:
        try:
            children = self.source.list_children(path)
        except PermissionError:
            self._skip_entry("permission denied", path)
            return
        except OSError:
            self._skip_entry("access error", path)
            return
        self._visit_children(path, relative, children, mode)

    def _visit_children(self, directory: str, relative: str,
                        children: list[str], mode: SweepMode) -> None:
        for name in children:
            path = self.source.join(directory, name)
            child_relative = f"{relative}/{name}" if relative else name

            try:
                is_dir = self.source.is_dir(path)
            except OSError:
                self._skip_entry("access error", path)
                continue

            if mode is SweepMode.REVERT:
                if is_dir:
                    self._visit_dir(path, child_relative, mode)
                elif is_backup(path, self.config):
                    self._revert(path)
                continue

            if should_skip(child_relative, self.config):
                if is_dir:
                    self.stats["dirs_pruned"] += 1
                    logger.debug("Pruned {path}", path=path)
                continue

            if is_dir:
                self._visit_dir(path, child_relative, mode)
                continue

            if not is_relevant_extension(child_relative, self.config):
                continue

            if mode is SweepMode.REMOVE:
                self._remove(path)
            else:
                self._report(path)

    def _skip_entry(self, reason: str, path: str) -> None:
        self.stats["entries_skipped"] += 1
        logger.warning("Skipping {path}: {reason}", path=path, reason=reason)
        self.echo(f"Skipping ({reason}): {path}")

    def _fail(self, error: SweepError) -> None:
        self.stats["errors"] += 1
        logger.error("{err}", err=str(error))
        self.echo(f"Error: {error}")

    def _report(self, path: str) -> None:
        try:
            content = read_file(path, self.source)
        except FileOperationError as e:
            self._fail(e)
            return

        self.stats["files_scanned"] += 1
        for record in find_matches(content, self.config):
            self.stats["matches"] += 1
            self.echo(f"File: {path}\n{record.span_label}: {record.text}\n")

    def _remove(self, path: str) -> None:
        try:
            result = apply_removal(path, self.source, self.config)
        except FileOperationError as e:
            self._fail(e)
            return

        self.stats["files_scanned"] += 1
        if result.changed:
            self.stats["files_updated"] += 1
            self.stats["matches"] += result.removed_statements
            backup_path = to_backup(path, self.config)
            self.echo(f"Updated file: {path} (backup created at {backup_path})")

    def _revert(self, backup_path: str) -> None:
        try:
            original_path = revert_backup(backup_path, self.source, self.config)
        except SweepError as e:
            self._fail(e)
            return

        self.stats["files_reverted"] += 1
        self.echo(f"Reverted file: {original_path} (backup deleted)")
