"""Entry sources - the filesystem capabilities the walker and mutator need.

LocalEntrySource talks to the real filesystem. MemoryEntrySource keeps a
tree of files in a dict so traversal, mutation and revert can be tested
without touching disk.
"""

import os
import posixpath
from abc import ABC, abstractmethod


class EntrySource(ABC):
    """List, read, write and remove entries addressed by string paths."""

    @abstractmethod
    def join(self, parent: str, name: str) -> str:
        """Build a child path."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """True if the entry exists."""

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """True for directories. Symbolic links are never directories."""

    @abstractmethod
    def list_children(self, path: str) -> list[str]:
        """Names of the entries in a directory, sorted.

        Raises:
            OSError: If the directory cannot be listed
        """

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Whole file content."""

    @abstractmethod
    def write_bytes(self, path: str, content: bytes) -> None:
        """Create or truncate the file and write content."""

    @abstractmethod
    def remove(self, path: str) -> None:
        """Delete a file."""


class LocalEntrySource(EntrySource):
    """EntrySource over the real filesystem."""

    def join(self, parent: str, name: str) -> str:
        return os.path.join(parent, name)

    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def is_dir(self, path: str) -> bool:
        # Walk like lstat does: do not descend through symlinked directories
        return os.path.isdir(path) and not os.path.islink(path)

    def list_children(self, path: str) -> list[str]:
        return sorted(os.listdir(path))

    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def write_bytes(self, path: str, content: bytes) -> None:
        with open(path, "wb") as f:
            f.write(content)

    def remove(self, path: str) -> None:
        os.remove(path)


class MemoryEntrySource(EntrySource):
    """In-memory tree of files keyed by forward-slash paths.

    Directories exist implicitly as prefixes of file paths or explicitly
    through make_dir(). Paths in `denied` raise PermissionError on any
    access, paths in `read_only` raise PermissionError on write and remove.
    """

    def __init__(self, files: dict[str, bytes] | None = None):
        self.files: dict[str, bytes] = {}
        self.dirs: set[str] = set()
        self.denied: set[str] = set()
        self.read_only: set[str] = set()
        for path, content in (files or {}).items():
            self.add_file(path, content)

    @staticmethod
    def _norm(path: str) -> str:
        return posixpath.normpath(path.replace("\\", "/"))

    def make_dir(self, path: str) -> None:
        path = self._norm(path)
        while path not in ("", ".", "/"):
            self.dirs.add(path)
            path = posixpath.dirname(path)

    def add_file(self, path: str, content: bytes | str) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")
        path = self._norm(path)
        self.files[path] = content
        parent = posixpath.dirname(path)
        if parent:
            self.make_dir(parent)

    def _check(self, path: str) -> str:
        path = self._norm(path)
        if path in self.denied:
            raise PermissionError(13, "Permission denied", path)
        return path

    def join(self, parent: str, name: str) -> str:
        return posixpath.join(parent, name)

    def exists(self, path: str) -> bool:
        path = self._norm(path)
        return path in self.files or path in self.dirs

    def is_dir(self, path: str) -> bool:
        return self._norm(path) in self.dirs

    def list_children(self, path: str) -> list[str]:
        path = self._check(path)
        if path not in self.dirs:
            raise FileNotFoundError(2, "No such directory", path)
        prefix = path + "/"
        names = {
            entry[len(prefix):].split("/", 1)[0]
            for entry in (*self.files, *self.dirs)
            if entry.startswith(prefix)
        }
        return sorted(names)

    def read_bytes(self, path: str) -> bytes:
        path = self._check(path)
        if path not in self.files:
            raise FileNotFoundError(2, "No such file", path)
        return self.files[path]

    def write_bytes(self, path: str, content: bytes) -> None:
        path = self._check(path)
        if path in self.read_only:
            raise PermissionError(13, "Permission denied", path)
        if path in self.dirs:
            raise IsADirectoryError(21, "Is a directory", path)
        self.files[path] = bytes(content)

    def remove(self, path: str) -> None:
        path = self._check(path)
        if path in self.read_only:
            raise PermissionError(13, "Permission denied", path)
        if path not in self.files:
            raise FileNotFoundError(2, "No such file", path)
        del self.files[path]
