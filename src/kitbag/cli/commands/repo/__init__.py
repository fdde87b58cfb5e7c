"""Repository registration commands."""

import click

from kitbag.cli.commands.repo.add_cmd import add_repo
from kitbag.cli.commands.repo.list_cmd import list_repos
from kitbag.cli.commands.repo.remove_cmd import remove_repo
from kitbag.cli.commands.repo.update_cmd import update_repos


@click.group("repo")
def repo_group() -> None:
    """Manage package repositories."""
    pass


# Register subcommands
repo_group.add_command(add_repo)
repo_group.add_command(list_repos)
repo_group.add_command(remove_repo)
repo_group.add_command(update_repos)
