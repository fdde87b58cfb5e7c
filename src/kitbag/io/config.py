"""Global configuration data structures and loading.

Provides immutable global config loaded from
$XDG_CONFIG_HOME/kitbag/config.toml (default ~/.config/kitbag/config.toml).
A missing file means defaults. Environment variables override file values.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from pathlib import Path

import tomli_w

from kitbag.errors import ConfigError

APP_NAME = "kitbag"
CONFIG_FILE_NAME = "config.toml"
DEFAULT_GITHUB_BASE_URL = "https://github.com"

DATA_DIR_ENV = "KITBAG_DATA_DIR"
ARTIFACTS_DIR_ENV = "KITBAG_ARTIFACTS_DIR"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in KitbagContext.

    Attributes:
        data_dir: Holds repos.json, installed.json and the repos/ mirrors
        artifacts_dir: Base directory artifacts are installed into
        github_base_url: Prefix used to build clone URLs for gh:owner/repo
    """

    data_dir: Path
    artifacts_dir: Path
    github_base_url: str = DEFAULT_GITHUB_BASE_URL

    @staticmethod
    def defaults() -> "GlobalConfig":
        home = Path.home()
        return GlobalConfig(
            data_dir=home / ".kitbag",
            artifacts_dir=home / ".claude",
        )

    @property
    def repos_dir(self) -> Path:
        return self.data_dir / "repos"

    def with_env_overrides(self, environ: dict[str, str]) -> "GlobalConfig":
        """Apply KITBAG_DATA_DIR / KITBAG_ARTIFACTS_DIR overrides."""
        config = self
        if environ.get(DATA_DIR_ENV):
            config = replace(config, data_dir=Path(environ[DATA_DIR_ENV]).expanduser())
        if environ.get(ARTIFACTS_DIR_ENV):
            config = replace(
                config, artifacts_dir=Path(environ[ARTIFACTS_DIR_ENV]).expanduser()
            )
        return config


def default_config_path(environ: dict[str, str] | None = None) -> Path:
    """Return the config file path, honoring XDG_CONFIG_HOME."""
    env = os.environ if environ is None else environ
    config_home = env.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / APP_NAME / CONFIG_FILE_NAME


class ConfigStore(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if the config file exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load config, falling back to defaults when no file exists.

        Raises:
            ConfigError: If the file is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Persist config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Path of the config file (for messages and debugging)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads and writes config.toml."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path if config_path is not None else default_config_path()

    def exists(self) -> bool:
        return self._config_path.exists()

    def load(self) -> GlobalConfig:
        defaults = GlobalConfig.defaults()
        if not self._config_path.exists():
            return defaults.with_env_overrides(dict(os.environ))

        try:
            data = tomllib.loads(self._config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Malformed config at {self._config_path}: {e}") from e

        config = GlobalConfig(
            data_dir=_read_path(data, "data_dir", defaults.data_dir, self._config_path),
            artifacts_dir=_read_path(
                data, "artifacts_dir", defaults.artifacts_dir, self._config_path
            ),
            github_base_url=_read_str(
                data, "github_base_url", defaults.github_base_url, self._config_path
            ),
        )
        return config.with_env_overrides(dict(os.environ))

    def save(self, config: GlobalConfig) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "data_dir": str(config.data_dir),
            "artifacts_dir": str(config.artifacts_dir),
            "github_base_url": config.github_base_url,
        }
        with self._config_path.open("wb") as f:
            tomli_w.dump(data, f)

    def path(self) -> Path:
        return self._config_path


def _read_str(data: dict[str, object], key: str, default: str, source: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' in {source} must be a non-empty string")
    return value


def _read_path(data: dict[str, object], key: str, default: Path, source: Path) -> Path:
    if key not in data:
        return default
    return Path(_read_str(data, key, str(default), source)).expanduser()
