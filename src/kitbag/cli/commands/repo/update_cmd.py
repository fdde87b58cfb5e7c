import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.output import user_output, warning_output
from kitbag.context import KitbagContext


@click.command("update")
@click.argument("namespaces", nargs=-1)
@click.pass_obj
@cli_error_boundary
def update_repos(ctx: KitbagContext, namespaces: tuple[str, ...]) -> None:
    """Pull the latest changes into repository mirrors.

    Updates every registered repository when no NAMESPACES are given.
    """
    if namespaces:
        for namespace in namespaces:
            user_output(f"Updating {namespace}...")
            ctx.registry.update(namespace)
        user_output(click.style("✓ ", fg="green") + f"Updated {len(namespaces)} repositories")
        return

    results = ctx.registry.update_all()
    if not results:
        user_output("No repositories registered.")
        return

    for result in results:
        if result.error is not None:
            warning_output(f"failed to update {result.namespace}: {result.error}")
            continue
        user_output(click.style("✓ ", fg="green") + f"Updated {result.namespace}")

    succeeded = sum(1 for result in results if result.succeeded)
    user_output(f"\nUpdated {succeeded} of {len(results)} repositories.")
