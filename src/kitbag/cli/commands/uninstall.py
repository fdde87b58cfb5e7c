import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.output import user_output, warning_output
from kitbag.context import KitbagContext


@click.command("uninstall")
@click.argument("name")
@click.pass_obj
@cli_error_boundary
def uninstall_cmd(ctx: KitbagContext, name: str) -> None:
    """Remove an installed package and its files.

    NAME is the namespaced package name shown by `kitbag list`.
    """
    result = ctx.manager.uninstall(name)

    user_output(click.style("✓ ", fg="green") + f"Uninstalled {result.package.name}")
    user_output(f"  Removed {result.removed_count} files")
    if result.skipped_count:
        warning_output(f"{result.skipped_count} files were already missing or could not be removed")
