import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.output import user_output
from kitbag.context import KitbagContext


@click.command("remove")
@click.argument("namespace")
@click.pass_obj
@cli_error_boundary
def remove_repo(ctx: KitbagContext, namespace: str) -> None:
    """Unregister a repository and delete its local mirror.

    Packages installed from it stay installed.
    """
    registration = ctx.registry.remove(namespace)
    user_output(click.style("✓ ", fg="green") + f"Removed {registration.namespace}")
