"""Configuration commands."""

import click

from kitbag.cli.commands.config.init_cmd import init_config
from kitbag.cli.commands.config.show_cmd import show_config


@click.group("config")
def config_group() -> None:
    """Show or create the kitbag configuration file."""
    pass


# Register subcommands
config_group.add_command(init_config)
config_group.add_command(show_config)
