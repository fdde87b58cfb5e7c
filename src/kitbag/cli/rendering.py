"""Rich table rendering for listing commands."""

from rich.console import Console
from rich.table import Table

from kitbag.models.catalog import BrowseItem
from kitbag.models.ledger import InstalledPackage
from kitbag.models.registry import RepositoryRegistration
from kitbag.models.results import UpdateInfo

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_DESCRIPTION_LENGTH = 60


def _console() -> Console:
    return Console(width=200, highlight=False)


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def render_repositories(registrations: list[RepositoryRegistration]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("namespace", style="cyan", no_wrap=True)
    table.add_column("url", no_wrap=True)
    table.add_column("branch", no_wrap=True)
    table.add_column("added", no_wrap=True)

    for registration in registrations:
        table.add_row(
            registration.namespace,
            registration.url,
            registration.default_branch,
            registration.added_at.strftime(TIMESTAMP_FORMAT),
        )

    _console().print(table)


def render_packages(packages: list[InstalledPackage]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("type", no_wrap=True)
    table.add_column("version", no_wrap=True)
    table.add_column("installed", no_wrap=True)

    for package in packages:
        table.add_row(
            package.name,
            package.type.value,
            f"{package.version.ref}@{package.version.short_sha}",
            package.installed_at.strftime(TIMESTAMP_FORMAT),
        )

    _console().print(table)


def render_updates(updates: list[UpdateInfo]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("current", no_wrap=True)
    table.add_column("latest", no_wrap=True)
    table.add_column("changes", no_wrap=True)

    for info in updates:
        table.add_row(
            info.package.name,
            info.current_sha[:8],
            info.latest_sha[:8],
            f"{len(info.changed_files)} files",
        )

    _console().print(table)


def render_browse_items(items: list[BrowseItem]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("type", no_wrap=True)
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("path", no_wrap=True)
    table.add_column("description")

    for item in items:
        table.add_row(
            item.type.value,
            item.name,
            item.path,
            _truncate(item.description or "", MAX_DESCRIPTION_LENGTH),
        )

    _console().print(table)
