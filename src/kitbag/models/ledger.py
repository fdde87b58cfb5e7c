"""Installed package ledger models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from kitbag.models.artifact import ArtifactKind

LEDGER_FORMAT_VERSION = 1
NAMESPACE_SEPARATOR = "--"
UNKNOWN_COMMIT = "unknown"


def make_namespaced_name(namespace: str, original_name: str) -> str:
    """Build the unique ledger key for a package, e.g. acme-tool--greeter."""
    return f"{namespace}{NAMESPACE_SEPARATOR}{original_name}"


def split_namespaced_name(name: str) -> tuple[str | None, str]:
    """Split a namespaced name into (namespace, original_name).

    Returns (None, name) when the separator is absent.
    """
    if NAMESPACE_SEPARATOR not in name:
        return None, name
    namespace, original = name.split(NAMESPACE_SEPARATOR, 1)
    return namespace, original


@dataclass(frozen=True)
class CommitKnown:
    """The mirror commit was resolved."""

    sha: str


@dataclass(frozen=True)
class CommitUnknown:
    """Commit resolution failed; install proceeds without a known commit."""

    reason: str


InstallCommit = CommitKnown | CommitUnknown


class InstalledFile(BaseModel):
    """One file owned by an installed package."""

    model_config = ConfigDict(frozen=True)

    source: str  # relative to the mirror root
    target: str  # absolute destination path
    sha: str = ""  # sha256 of the copied content


class PackageVersion(BaseModel):
    """Upstream commit a package was installed from."""

    model_config = ConfigDict(frozen=True)

    type: Literal["commit"] = "commit"
    sha: str
    ref: str

    @staticmethod
    def from_commit(commit: InstallCommit, ref: str) -> "PackageVersion":
        if isinstance(commit, CommitKnown):
            return PackageVersion(sha=commit.sha, ref=ref)
        return PackageVersion(sha=UNKNOWN_COMMIT, ref=ref)

    @property
    def is_known(self) -> bool:
        return self.sha != UNKNOWN_COMMIT

    @property
    def short_sha(self) -> str:
        return self.sha[:8]


class InstalledPackage(BaseModel):
    """A package recorded in the ledger."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    original_name: str = Field(..., min_length=1)
    type: ArtifactKind
    namespace: str = Field(..., min_length=1)
    source_path: str = Field(..., min_length=1)
    version: PackageVersion
    files: list[InstalledFile] = Field(default_factory=list)
    installed_at: datetime
    updated_at: datetime

    @property
    def spec(self) -> str:
        """Install spec that reproduces this package."""
        return f"{self.namespace}:{self.source_path}"


class LedgerDocument(BaseModel):
    """Top-level installed.json structure."""

    model_config = ConfigDict(frozen=True)

    version: int = LEDGER_FORMAT_VERSION
    packages: list[InstalledPackage] = Field(default_factory=list)

    def find(self, name: str) -> InstalledPackage | None:
        for package in self.packages:
            if package.name == name:
                return package
        return None

    def owner_of(self, target: str) -> InstalledPackage | None:
        """Return the package that owns a destination path, if any."""
        for package in self.packages:
            for installed_file in package.files:
                if installed_file.target == target:
                    return package
        return None

    def with_package(self, package: InstalledPackage) -> "LedgerDocument":
        """Return a new document with the package appended."""
        return self.model_copy(update={"packages": [*self.packages, package]})

    def without_package(self, name: str) -> "LedgerDocument":
        """Return a new document with the package removed."""
        remaining = [p for p in self.packages if p.name != name]
        return self.model_copy(update={"packages": remaining})
