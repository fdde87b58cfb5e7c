"""Package manager: install, uninstall and update artifacts from mirrors.

The manager is the only component that writes into the artifacts directory or
the ledger. An install either copies every file and records the package, or
leaves neither files nor a record behind.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from kitbag.errors import (
    AlreadyInstalledError,
    InstallError,
    InvalidSpecError,
    KitbagError,
    PackageNotFoundError,
    RepositoryNotFoundError,
    UnknownArtifactKindError,
    VersionControlError,
)
from kitbag.gateway.files.abc import FileOps
from kitbag.gateway.git.abc import Git
from kitbag.gateway.time.abc import Time
from kitbag.io.ledger import PackageLedger
from kitbag.models.artifact import KIND_LAYOUTS, ArtifactKind, KindLayout, kind_for_directory
from kitbag.models.ledger import (
    CommitKnown,
    CommitUnknown,
    InstallCommit,
    InstalledFile,
    InstalledPackage,
    LedgerDocument,
    PackageVersion,
    make_namespaced_name,
)
from kitbag.models.results import UninstallResult, UpdateInfo, UpdateReport
from kitbag.models.spec import InstallSpec
from kitbag.operations.registry import RepositoryRegistry
from kitbag.operations.spec_parser import parse_install_spec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _CopyStep:
    source: Path
    relative_source: str
    dest: Path


@dataclass(frozen=True)
class _ResolvedSource:
    kind: ArtifactKind
    layout: KindLayout
    original_name: str
    source_path: str


def is_under_source_path(path: str, source_path: str) -> bool:
    """Return True if a repository path is source_path itself or inside it."""
    prefix = source_path.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def resolve_source(spec: InstallSpec) -> _ResolvedSource:
    """Work out kind, original name and normalized source path from a spec path.

    Raises:
        UnknownArtifactKindError: If the first segment is not a kind directory
        InvalidSpecError: If the path names no item or escapes its kind directory
        InstallError: If a file kind lacks its required extension
    """
    segments = [segment for segment in spec.path.split("/") if segment]
    if any(segment in (".", "..") for segment in segments):
        raise InvalidSpecError(spec.format(), "path must not contain '.' or '..' segments")
    kind = kind_for_directory(segments[0]) if segments else None
    if kind is None:
        raise UnknownArtifactKindError(spec.path)

    layout = KIND_LAYOUTS[kind]
    if len(segments) < 2:
        raise InvalidSpecError(spec.format(), f"path names no {kind.value}")

    if layout.is_directory:
        name = segments[1]
        return _ResolvedSource(kind, layout, name, "/".join(segments[:2]))

    file_name = segments[-1]
    extension = layout.extension or ""
    if not file_name.endswith(extension):
        raise InstallError(f"{kind.value.capitalize()} '{spec.path}' must end with {extension}")
    name = file_name.removesuffix(extension)
    if not name:
        raise InvalidSpecError(spec.format(), f"path names no {kind.value}")
    return _ResolvedSource(kind, layout, name, "/".join(segments))


class PackageManager:
    """Orchestrates the install lifecycle on top of the registry, git and the ledger."""

    def __init__(
        self,
        *,
        registry: RepositoryRegistry,
        ledger: PackageLedger,
        git: Git,
        files: FileOps,
        time: Time,
        artifacts_dir: Path,
    ) -> None:
        self._registry = registry
        self._ledger = ledger
        self._git = git
        self._files = files
        self._time = time
        self._artifacts_dir = artifacts_dir

    def list_installed(self) -> list[InstalledPackage]:
        return list(self._ledger.load().packages)

    def get(self, name: str) -> InstalledPackage:
        """Return the ledger record for a namespaced name.

        Raises:
            PackageNotFoundError: If nothing is installed under name
        """
        package = self._ledger.load().find(name)
        if package is None:
            raise PackageNotFoundError(name)
        return package

    def destination_for(self, kind: ArtifactKind, name: str) -> Path:
        """Destination of a package: a directory for bundles, a file otherwise."""
        layout = KIND_LAYOUTS[kind]
        base = self._artifacts_dir / layout.directory
        if layout.is_directory:
            return base / name
        return base / f"{name}{layout.extension or ''}"

    def install(self, spec_text: str, *, force: bool = False) -> InstalledPackage:
        """Install the artifact named by an install spec.

        Args:
            spec_text: namespace:path[@version]
            force: Overwrite destination files that no package owns

        Raises:
            InvalidSpecError: If spec_text is malformed
            RepositoryNotFoundError: If the namespace is not registered
            UnknownArtifactKindError: If the path is not under a kind directory
            AlreadyInstalledError: If the namespaced name is already recorded
            InstallError: If copying or recording fails; nothing is left behind
        """
        spec = parse_install_spec(spec_text)
        if spec.version is not None:
            logger.debug(
                "Version '%s' requested for %s; installing the mirror's current commit",
                spec.version,
                spec.path,
            )
        return self._install(spec, force=force, installed_at=None)

    def resolve_install_commit(self, mirror: Path) -> InstallCommit:
        """Resolve the mirror's HEAD, tolerating failure."""
        try:
            return CommitKnown(sha=self._git.current_commit(mirror))
        except VersionControlError as e:
            logger.warning("Could not resolve commit of %s: %s", mirror, e.stderr or e)
            return CommitUnknown(reason=str(e))

    def _install(
        self,
        spec: InstallSpec,
        *,
        force: bool,
        installed_at: datetime | None,
    ) -> InstalledPackage:
        registration = self._registry.get(spec.namespace)
        mirror = self._registry.mirror_path(spec.namespace)
        if not mirror.is_dir():
            raise RepositoryNotFoundError(spec.namespace)

        resolved = resolve_source(spec)
        name = make_namespaced_name(spec.namespace, resolved.original_name)

        document = self._ledger.load()
        if document.find(name) is not None:
            raise AlreadyInstalledError(name)

        commit = self.resolve_install_commit(mirror)
        destination = self.destination_for(resolved.kind, name)
        steps = self._plan_copy(resolved, mirror / resolved.source_path, destination)
        self._check_destinations(document, steps, force=force)

        logger.debug("Installing %s (%d files) into %s", name, len(steps), destination)
        created_root = resolved.layout.is_directory and not destination.exists()
        copied: list[Path] = []
        installed_files: list[InstalledFile] = []
        try:
            for step in steps:
                # Claimed before copying so a torn write is rolled back too
                copied.append(step.dest)
                sha = self._files.copy_file(step.source, step.dest)
                if resolved.layout.executable:
                    self._files.make_executable(step.dest)
                installed_files.append(
                    InstalledFile(source=step.relative_source, target=str(step.dest), sha=sha)
                )
        except OSError as e:
            self._rollback(copied, destination if created_root else None)
            raise InstallError(f"Failed to copy files for {name}: {e}") from e

        now = self._time.now()
        package = InstalledPackage(
            name=name,
            original_name=resolved.original_name,
            type=resolved.kind,
            namespace=spec.namespace,
            source_path=resolved.source_path,
            version=PackageVersion.from_commit(commit, registration.default_branch),
            files=installed_files,
            installed_at=installed_at if installed_at is not None else now,
            updated_at=now,
        )

        try:
            self._ledger.save(document.with_package(package))
        except OSError as e:
            self._rollback(copied, destination if created_root else None)
            raise InstallError(f"Failed to record {name} in the ledger: {e}") from e

        return package

    def _plan_copy(
        self,
        resolved: _ResolvedSource,
        source: Path,
        destination: Path,
    ) -> list[_CopyStep]:
        if not resolved.layout.is_directory:
            if not source.is_file():
                raise InstallError(f"Source not found in mirror: {resolved.source_path}")
            return [_CopyStep(source, resolved.source_path, destination)]

        if not source.is_dir():
            raise InstallError(f"Source not found in mirror: {resolved.source_path}")

        steps: list[_CopyStep] = []
        for path in sorted(source.rglob("*")):
            if not path.is_file():
                continue
            relative = path.relative_to(source)
            steps.append(
                _CopyStep(
                    source=path,
                    relative_source=f"{resolved.source_path}/{relative.as_posix()}",
                    dest=destination / relative,
                )
            )
        if not steps:
            raise InstallError(f"No files found in {resolved.source_path}")
        return steps

    def _check_destinations(
        self,
        document: LedgerDocument,
        steps: Sequence[_CopyStep],
        *,
        force: bool,
    ) -> None:
        for step in steps:
            owner = document.owner_of(str(step.dest))
            if owner is not None:
                raise InstallError(f"{step.dest} is already owned by package '{owner.name}'")
            if step.dest.exists() and not force:
                raise InstallError(
                    f"{step.dest} already exists and is not managed by kitbag. "
                    "Use --force to overwrite"
                )

    def _rollback(self, copied: Sequence[Path], created_root: Path | None) -> None:
        for path in copied:
            try:
                self._files.remove_file(path)
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning("Rollback could not remove %s: %s", path, e)
        if created_root is not None:
            try:
                self._files.remove_tree(created_root)
            except OSError as e:
                logger.warning("Rollback could not remove %s: %s", created_root, e)

    def uninstall(self, name: str) -> UninstallResult:
        """Remove a package's files and its ledger record.

        Files that are already gone or cannot be removed are skipped and
        counted. Bundles also lose their whole destination directory.

        Raises:
            PackageNotFoundError: If nothing is installed under name
        """
        document = self._ledger.load()
        package = document.find(name)
        if package is None:
            raise PackageNotFoundError(name)

        removed = 0
        skipped = 0
        for installed_file in package.files:
            target = Path(installed_file.target)
            try:
                self._files.remove_file(target)
            except OSError as e:
                logger.debug("Skipping %s: %s", target, e)
                skipped += 1
                continue
            removed += 1

        if KIND_LAYOUTS[package.type].is_directory:
            bundle_dir = self.destination_for(package.type, package.name)
            try:
                self._files.remove_tree(bundle_dir)
            except OSError as e:
                logger.warning("Could not remove %s: %s", bundle_dir, e)

        self._ledger.save(document.without_package(name))
        return UninstallResult(package=package, removed_count=removed, skipped_count=skipped)

    def check_updates(self, names: Sequence[str] = ()) -> UpdateReport:
        """Compare each selected package's recorded commit with its upstream branch.

        Args:
            names: Namespaced names to check; all packages when empty

        Raises:
            PackageNotFoundError: If a requested name is not installed
        """
        document = self._ledger.load()
        for name in names:
            if document.find(name) is None:
                raise PackageNotFoundError(name)

        wanted = set(names)
        selected = [p for p in document.packages if not wanted or p.name in wanted]

        updates: list[UpdateInfo] = []
        failures: dict[str, str] = {}
        for package in selected:
            try:
                updates.append(self._check_package(package))
            except KitbagError as e:
                logger.debug("Could not check %s for updates: %s", package.name, e)
                failures[package.name] = str(e)
        return UpdateReport(updates=updates, failures=failures)

    def _check_package(self, package: InstalledPackage) -> UpdateInfo:
        registration = self._registry.get(package.namespace)
        mirror = self._registry.mirror_path(package.namespace)
        if not mirror.is_dir():
            raise RepositoryNotFoundError(package.namespace)

        self._git.fetch(mirror)
        branch = registration.default_branch
        latest = self._git.remote_commit(mirror, branch)
        current = package.version.sha

        if current == latest or not package.version.is_known:
            return UpdateInfo(
                package=package,
                current_sha=current,
                latest_sha=latest,
                has_update=current != latest,
            )

        try:
            raw = self._git.changed_files(mirror, current, f"origin/{branch}")
        except VersionControlError as e:
            logger.warning("Could not diff %s against origin/%s: %s", package.name, branch, e)
            raw = []

        changed = [path for path in raw if is_under_source_path(path, package.source_path)]
        return UpdateInfo(
            package=package,
            current_sha=current,
            latest_sha=latest,
            has_update=True,
            changed_files=changed,
        )

    def update(self, name: str) -> InstalledPackage:
        """Reinstall a package from the freshly pulled head of its mirror.

        The new record keeps the original installed_at.

        Raises:
            PackageNotFoundError: If nothing is installed under name
            RepositoryNotFoundError: If its repository is no longer registered
            VersionControlError: If the pull fails
        """
        package = self.get(name)
        self._registry.update(package.namespace)
        self.uninstall(name)
        spec = InstallSpec(namespace=package.namespace, path=package.source_path)
        return self._install(spec, force=True, installed_at=package.installed_at)
