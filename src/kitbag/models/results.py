"""Result types returned by registry and package manager operations."""

from dataclasses import dataclass, field

from kitbag.models.ledger import InstalledPackage


@dataclass(frozen=True)
class RepoUpdateResult:
    """Outcome of pulling one mirror during a batch update."""

    namespace: str
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class UninstallResult:
    """Outcome of removing a package's files."""

    package: InstalledPackage
    removed_count: int
    skipped_count: int


@dataclass(frozen=True)
class UpdateInfo:
    """Drift between an installed package and its upstream branch."""

    package: InstalledPackage
    current_sha: str
    latest_sha: str
    has_update: bool
    changed_files: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateReport:
    """Result of checking a set of packages for updates.

    failures maps package name to the error text of a check that could not run.
    """

    updates: list[UpdateInfo]
    failures: dict[str, str] = field(default_factory=dict)

    @property
    def available(self) -> list[UpdateInfo]:
        return [info for info in self.updates if info.has_update]
