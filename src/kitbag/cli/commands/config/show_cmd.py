import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.output import user_output
from kitbag.context import KitbagContext


@click.command("show")
@click.pass_obj
@cli_error_boundary
def show_config(ctx: KitbagContext) -> None:
    """Print the effective configuration."""
    config = ctx.config
    source = ctx.config_store.path()
    if not ctx.config_store.exists():
        source_label = f"{source} (not created, using defaults)"
    else:
        source_label = str(source)

    user_output(click.style("Config file: ", bold=True) + source_label)
    user_output(f"data_dir={config.data_dir}")
    user_output(f"artifacts_dir={config.artifacts_dir}")
    user_output(f"github_base_url={config.github_base_url}")
