"""Exception hierarchy for kitbag.

Every error raised by the package manager derives from KitbagError so the CLI
error boundary can render it as a single "Error: ..." line. None of these are
retried internally.
"""


class KitbagError(Exception):
    """Base class for all kitbag errors."""


class InvalidSpecError(KitbagError):
    """Raised when an install spec does not match namespace:path[@version]."""

    def __init__(self, spec: str, reason: str) -> None:
        self.spec = spec
        self.reason = reason
        super().__init__(
            f"Invalid install spec '{spec}': {reason}. Format: namespace:path[@version]"
        )


class InvalidRepositoryURLError(KitbagError):
    """Raised when a repository URL is not gh:owner/repo or a GitHub https URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Invalid repository URL '{url}'. Use: gh:owner/repo")


class InvalidNamespaceError(KitbagError):
    """Raised when an explicit namespace contains characters outside [a-z0-9-]."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(
            f"Invalid namespace '{namespace}': use lowercase letters, digits and hyphens"
        )


class NamespaceExistsError(KitbagError):
    """Raised when registering a repository under a namespace already in use."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(f"Namespace '{namespace}' already exists. Choose one with --namespace")


class RepositoryNotFoundError(KitbagError):
    """Raised when no repository is registered under a namespace."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(
            f"Repository '{namespace}' not found. Register with: kitbag repo add gh:owner/repo"
        )


class PackageNotFoundError(KitbagError):
    """Raised when a namespaced name is not present in the ledger."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Package '{name}' not found. Use 'kitbag list' to see installed packages"
        )


class AlreadyInstalledError(KitbagError):
    """Raised when installing a package whose namespaced name is already recorded."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Package '{name}' is already installed. Use 'kitbag update {name}'")


class UnknownArtifactKindError(KitbagError):
    """Raised when a path's first segment is not a conventional kind directory."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Cannot determine artifact kind from path '{path}' "
            "(expected bundles/, snippets/, profiles/ or triggers/)"
        )


class InstallError(KitbagError):
    """Raised when copying files or persisting the ledger fails during install.

    Raised only after every file copied for the install has been removed again.
    """


class VersionControlError(KitbagError):
    """Raised when a git subprocess fails.

    Carries the command, exit status and stderr text verbatim.
    """

    def __init__(
        self,
        operation: str,
        command: list[str],
        returncode: int | None,
        stderr: str,
    ) -> None:
        self.operation = operation
        self.command = command
        self.returncode = returncode
        self.stderr = stderr

        message = f"Failed to {operation}"
        message += f"\nCommand: {' '.join(command)}"
        if returncode is not None:
            message += f"\nExit code: {returncode}"
        if stderr:
            message += f"\nstderr: {stderr}"
        super().__init__(message)


class ConfigError(KitbagError):
    """Raised when the configuration file is malformed."""
