import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.output import user_output
from kitbag.context import KitbagContext


@click.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_obj
@cli_error_boundary
def init_config(ctx: KitbagContext, force: bool) -> None:
    """Write the current settings to the config file."""
    path = ctx.config_store.path()
    if ctx.config_store.exists() and not force:
        raise FileExistsError(f"Config already exists at {path}. Use --force to overwrite")

    ctx.config_store.save(ctx.config)
    user_output(click.style("✓ ", fg="green") + f"Wrote config to {path}")
