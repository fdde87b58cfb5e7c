import logging

import click

from kitbag.cli.commands.browse import browse_cmd
from kitbag.cli.commands.config import config_group
from kitbag.cli.commands.info import info_cmd
from kitbag.cli.commands.install import install_cmd
from kitbag.cli.commands.list_cmd import list_cmd
from kitbag.cli.commands.repo import repo_group
from kitbag.cli.commands.search import search_cmd
from kitbag.cli.commands.uninstall import uninstall_cmd
from kitbag.cli.commands.update import update_cmd
from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.context import create_context
from kitbag.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags
DEBUG_LOG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"
WARNING_LOG_FORMAT = "Warning: %(message)s"


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format=WARNING_LOG_FORMAT)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="kitbag")
@click.option("--debug", is_flag=True, help="Show debug logging and tracebacks.")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, debug: bool) -> None:
    """Install bundles, snippets, profiles and triggers from git repositories."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)
    configure_logging(ctx.obj.debug)


# Register all commands
cli.add_command(repo_group)
cli.add_command(install_cmd)
cli.add_command(uninstall_cmd)
cli.add_command(update_cmd)
cli.add_command(list_cmd)
cli.add_command(info_cmd)
cli.add_command(browse_cmd)
cli.add_command(search_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `kitbag` console script."""
    cli()
