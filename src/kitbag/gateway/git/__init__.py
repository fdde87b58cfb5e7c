"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes.
"""

from kitbag.gateway.git.abc import Git
from kitbag.gateway.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
]
