"""Repository registry: register, mirror and refresh remote repositories."""

import logging
import re
import shutil
from dataclasses import dataclass
from pathlib import Path

from kitbag.errors import (
    InvalidNamespaceError,
    InvalidRepositoryURLError,
    KitbagError,
    NamespaceExistsError,
    RepositoryNotFoundError,
)
from kitbag.gateway.git.abc import Git
from kitbag.gateway.time.abc import Time
from kitbag.io.registry_store import RegistryStore
from kitbag.models.registry import RepositoryRegistration
from kitbag.models.results import RepoUpdateResult
from kitbag.operations.spec_parser import is_valid_namespace

logger = logging.getLogger(__name__)

GH_SHORTHAND_PATTERN = re.compile(r"^gh:([a-zA-Z0-9_-]+)/([a-zA-Z0-9_.-]+)$")
GITHUB_HTTPS_PATTERN = re.compile(
    r"^https://github\.com/([a-zA-Z0-9_-]+)/([a-zA-Z0-9_.-]+?)(?:\.git)?/?$"
)
NAMESPACE_PART_LENGTH = 4


@dataclass(frozen=True)
class RepositoryURL:
    """Owner and repository name parsed from a user-supplied URL."""

    owner: str
    repo: str

    @property
    def canonical(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}"

    def clone_url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/{self.owner}/{self.repo}.git"


def parse_repository_url(url: str) -> RepositoryURL:
    """Parse gh:owner/repo or https://github.com/owner/repo[.git].

    Raises:
        InvalidRepositoryURLError: If url matches neither form
    """
    for pattern in (GH_SHORTHAND_PATTERN, GITHUB_HTTPS_PATTERN):
        match = pattern.match(url.strip())
        if match is not None:
            return RepositoryURL(owner=match.group(1), repo=match.group(2))
    raise InvalidRepositoryURLError(url)


def derive_namespace(owner: str, repo: str) -> str:
    """Generate a namespace from owner and repo names.

    Format: first 4 chars of owner + "-" + first 4 chars of repo, lowercased.
    Characters outside [a-z0-9-] are replaced with "-".

    Example:
        >>> derive_namespace("acme", "tools")
        'acme-tool'
    """
    raw = f"{owner[:NAMESPACE_PART_LENGTH]}-{repo[:NAMESPACE_PART_LENGTH]}".lower()
    return re.sub(r"[^a-z0-9-]", "-", raw)


class RepositoryRegistry:
    """Durable record of registered repositories and their local mirrors.

    Owns namespace uniqueness. Mirrors live at <repos_dir>/<namespace>.
    Cloning and pulling are delegated to the Git gateway.
    """

    def __init__(
        self,
        *,
        store: RegistryStore,
        git: Git,
        time: Time,
        repos_dir: Path,
        github_base_url: str,
    ) -> None:
        self._store = store
        self._git = git
        self._time = time
        self._repos_dir = repos_dir
        self._github_base_url = github_base_url

    def mirror_path(self, namespace: str) -> Path:
        return self._repos_dir / namespace

    def list_repositories(self) -> list[RepositoryRegistration]:
        return list(self._store.load().repos)

    def exists(self, namespace: str) -> bool:
        return self._store.load().find(namespace) is not None

    def get(self, namespace: str) -> RepositoryRegistration:
        """Return the registration for namespace.

        Raises:
            RepositoryNotFoundError: If no repository is registered under namespace
        """
        registration = self._store.load().find(namespace)
        if registration is None:
            raise RepositoryNotFoundError(namespace)
        return registration

    def add(self, url: str, namespace: str | None = None) -> RepositoryRegistration:
        """Register a repository and clone its mirror.

        Steps run in a fixed order so the registration is persisted only once
        the mirror exists: validate URL, pick namespace, check uniqueness,
        clone, probe default branch, save.

        Args:
            url: gh:owner/repo or a GitHub https URL
            namespace: Explicit namespace; derived from owner/repo when None or empty

        Raises:
            InvalidRepositoryURLError: If url is malformed
            InvalidNamespaceError: If the explicit namespace is malformed
            NamespaceExistsError: If the namespace is already registered
            VersionControlError: If cloning or branch detection fails
        """
        parsed = parse_repository_url(url)

        if namespace:
            if not is_valid_namespace(namespace):
                raise InvalidNamespaceError(namespace)
            chosen = namespace
        else:
            chosen = derive_namespace(parsed.owner, parsed.repo)

        document = self._store.load()
        if document.find(chosen) is not None:
            raise NamespaceExistsError(chosen)

        mirror = self.mirror_path(chosen)
        self._repos_dir.mkdir(parents=True, exist_ok=True)
        clone_url = parsed.clone_url(self._github_base_url)
        logger.debug("Cloning %s into %s", clone_url, mirror)
        self._git.clone(clone_url, mirror, shallow=True)

        try:
            default_branch = self._git.default_branch(mirror)
            registration = RepositoryRegistration(
                namespace=chosen,
                url=parsed.canonical,
                owner=parsed.owner,
                repo=parsed.repo,
                default_branch=default_branch,
                added_at=self._time.now(),
            )
            self._store.save(document.with_repo(registration))
        except (KitbagError, OSError, ValueError):
            logger.debug("Registration of %s failed, removing mirror %s", chosen, mirror)
            shutil.rmtree(mirror, ignore_errors=True)
            raise

        return registration

    def remove(self, namespace: str) -> RepositoryRegistration:
        """Delete a registration and its mirror.

        Packages installed from the repository are left untouched.

        Raises:
            RepositoryNotFoundError: If namespace is not registered
        """
        document = self._store.load()
        registration = document.find(namespace)
        if registration is None:
            raise RepositoryNotFoundError(namespace)

        self._store.save(document.without_repo(namespace))

        mirror = self.mirror_path(namespace)
        if mirror.exists():
            shutil.rmtree(mirror)
        return registration

    def update(self, namespace: str) -> None:
        """Fast-forward pull one mirror.

        Raises:
            RepositoryNotFoundError: If namespace is not registered or has no mirror
            VersionControlError: If the pull fails
        """
        self.get(namespace)
        mirror = self.mirror_path(namespace)
        if not mirror.is_dir():
            raise RepositoryNotFoundError(namespace)
        self._git.pull(mirror, ff_only=True)

    def update_all(self) -> list[RepoUpdateResult]:
        """Fast-forward pull every mirror, one after another.

        A failure on one repository is recorded in its result and the batch
        continues with the next.
        """
        results: list[RepoUpdateResult] = []
        for registration in self.list_repositories():
            try:
                self.update(registration.namespace)
            except KitbagError as e:
                logger.debug("Failed to update %s: %s", registration.namespace, e)
                results.append(RepoUpdateResult(namespace=registration.namespace, error=str(e)))
                continue
            results.append(RepoUpdateResult(namespace=registration.namespace))
        return results
