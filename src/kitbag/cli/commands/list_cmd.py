import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.json_output import emit_json
from kitbag.cli.output import user_output
from kitbag.cli.rendering import render_packages
from kitbag.context import KitbagContext


@click.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: KitbagContext, as_json: bool) -> None:
    """List installed packages."""
    packages = ctx.manager.list_installed()

    if as_json:
        emit_json({"packages": packages})
        return

    if not packages:
        user_output("No packages installed.")
        return

    render_packages(packages)
