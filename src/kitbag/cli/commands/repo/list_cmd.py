import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.json_output import emit_json
from kitbag.cli.output import user_output
from kitbag.cli.rendering import render_repositories
from kitbag.context import KitbagContext


@click.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_obj
@cli_error_boundary
def list_repos(ctx: KitbagContext, as_json: bool) -> None:
    """List registered repositories."""
    registrations = ctx.registry.list_repositories()

    if as_json:
        emit_json({"repos": registrations})
        return

    if not registrations:
        user_output("No repositories registered.")
        user_output("Add one with: kitbag repo add gh:owner/repo")
        return

    render_repositories(registrations)
