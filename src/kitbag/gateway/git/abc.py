"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
package manager testable without real repositories.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit (tests/fakes/git.py): In-memory implementation for tests

The gateway only deals in commits and refs. It never inspects file contents.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations on repository mirrors.

    All implementations (real and fake) must implement this interface.
    Every operation raises VersionControlError on failure and never retries.
    """

    @abstractmethod
    def is_installed(self) -> bool:
        """Check whether the git executable is available."""
        ...

    @abstractmethod
    def clone(self, url: str, dest: Path, *, shallow: bool = True) -> None:
        """Clone a repository into dest.

        Args:
            url: Remote URL to clone
            dest: Destination directory (must not exist yet)
            shallow: Clone only the latest commit (depth 1)
        """
        ...

    @abstractmethod
    def pull(self, repo_path: Path, *, ff_only: bool = True) -> None:
        """Pull the latest upstream changes into a mirror."""
        ...

    @abstractmethod
    def fetch(self, repo_path: Path) -> None:
        """Fetch upstream refs without touching the working tree."""
        ...

    @abstractmethod
    def current_commit(self, repo_path: Path) -> str:
        """Return the SHA of HEAD in the mirror."""
        ...

    @abstractmethod
    def remote_commit(self, repo_path: Path, branch: str) -> str:
        """Return the SHA of origin/<branch> as of the last fetch."""
        ...

    @abstractmethod
    def default_branch(self, repo_path: Path) -> str:
        """Detect the remote's default branch.

        Probes the origin/HEAD symbolic ref first, then falls back to checking
        for origin/main and origin/master.
        """
        ...

    @abstractmethod
    def changed_files(self, repo_path: Path, from_ref: str, to_ref: str) -> list[str]:
        """List repository-relative paths changed between two refs."""
        ...
