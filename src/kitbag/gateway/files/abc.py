"""Filesystem operations used when installing artifacts."""

from abc import ABC, abstractmethod
from pathlib import Path


class FileOps(ABC):
    """Abstract interface for the file writes performed by an install.

    Reads (walking a mirror, checking existence) go straight to pathlib; only
    the mutating operations go through this seam so tests can inject failures.
    """

    @abstractmethod
    def copy_file(self, source: Path, dest: Path) -> str:
        """Copy source to dest, creating parent directories.

        Returns:
            sha256 hex digest of the copied content
        """
        ...

    @abstractmethod
    def make_executable(self, path: Path) -> None:
        """Mark a file executable for user, group and others."""
        ...

    @abstractmethod
    def remove_file(self, path: Path) -> None:
        """Remove a single file. Raises FileNotFoundError if it is missing."""
        ...

    @abstractmethod
    def remove_tree(self, path: Path) -> None:
        """Recursively remove a directory if it exists."""
        ...
