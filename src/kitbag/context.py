"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from kitbag.gateway.files.abc import FileOps
from kitbag.gateway.files.real import RealFileOps
from kitbag.gateway.git.abc import Git
from kitbag.gateway.git.real import RealGit
from kitbag.gateway.time.abc import Time
from kitbag.gateway.time.real import RealTime
from kitbag.io.config import ConfigStore, FilesystemConfigStore, GlobalConfig
from kitbag.io.ledger import LEDGER_FILE_NAME, FilesystemPackageLedger, PackageLedger
from kitbag.io.registry_store import (
    REGISTRY_FILE_NAME,
    FilesystemRegistryStore,
    RegistryStore,
)
from kitbag.operations.catalog import CatalogScanner
from kitbag.operations.manager import PackageManager
from kitbag.operations.registry import RepositoryRegistry


@dataclass(frozen=True)
class KitbagContext:
    """Immutable context holding all dependencies for kitbag operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    files: FileOps
    time: Time
    config_store: ConfigStore
    config: GlobalConfig
    ledger: PackageLedger
    registry: RepositoryRegistry
    catalog: CatalogScanner
    manager: PackageManager
    debug: bool

    @staticmethod
    def for_test(
        git: Git | None = None,
        files: FileOps | None = None,
        time: Time | None = None,
        config_store: ConfigStore | None = None,
        config: GlobalConfig | None = None,
        ledger: PackageLedger | None = None,
        registry_store: RegistryStore | None = None,
        debug: bool = False,
    ) -> "KitbagContext":
        """Create test context with optional pre-configured integration classes.

        Unspecified collaborators default to their in-memory fakes. Mirrors and
        installed artifacts still live on disk under config.data_dir and
        config.artifacts_dir, so tests normally pass a config rooted at tmp_path.

        Example:
            >>> git = FakeGit(commits={mirror: "abc123"})
            >>> ctx = KitbagContext.for_test(git=git, config=config_in(tmp_path))
        """
        from tests.fakes.config import FakeConfigStore
        from tests.fakes.files import FailingFileOps
        from tests.fakes.git import FakeGit
        from tests.fakes.ledger import FakePackageLedger
        from tests.fakes.registry_store import FakeRegistryStore
        from tests.fakes.time import FakeTime

        if git is None:
            git = FakeGit()

        if files is None:
            files = FailingFileOps()

        if time is None:
            time = FakeTime()

        if config is None:
            config = GlobalConfig(
                data_dir=Path("/test/kitbag"),
                artifacts_dir=Path("/test/artifacts"),
            )

        if config_store is None:
            config_store = FakeConfigStore(config=config)

        if ledger is None:
            ledger = FakePackageLedger()

        if registry_store is None:
            registry_store = FakeRegistryStore()

        return _assemble(
            git=git,
            files=files,
            time=time,
            config_store=config_store,
            config=config,
            ledger=ledger,
            registry_store=registry_store,
            debug=debug,
        )


def _assemble(
    *,
    git: Git,
    files: FileOps,
    time: Time,
    config_store: ConfigStore,
    config: GlobalConfig,
    ledger: PackageLedger,
    registry_store: RegistryStore,
    debug: bool,
) -> KitbagContext:
    registry = RepositoryRegistry(
        store=registry_store,
        git=git,
        time=time,
        repos_dir=config.repos_dir,
        github_base_url=config.github_base_url,
    )
    manager = PackageManager(
        registry=registry,
        ledger=ledger,
        git=git,
        files=files,
        time=time,
        artifacts_dir=config.artifacts_dir,
    )
    return KitbagContext(
        git=git,
        files=files,
        time=time,
        config_store=config_store,
        config=config,
        ledger=ledger,
        registry=registry,
        catalog=CatalogScanner(registry),
        manager=manager,
        debug=debug,
    )


def create_context(*, debug: bool) -> KitbagContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Raises:
        ConfigError: If the config file exists but is malformed
    """
    # 1. Load global config (defaults when no file exists)
    config_store = FilesystemConfigStore()
    config = config_store.load()

    # 2. Documents live directly under the data directory
    ledger = FilesystemPackageLedger(config.data_dir / LEDGER_FILE_NAME)
    registry_store = FilesystemRegistryStore(config.data_dir / REGISTRY_FILE_NAME)

    return _assemble(
        git=RealGit(),
        files=RealFileOps(),
        time=RealTime(),
        config_store=config_store,
        config=config,
        ledger=ledger,
        registry_store=registry_store,
        debug=debug or _env_flag("KITBAG_DEBUG"),
    )


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes")
