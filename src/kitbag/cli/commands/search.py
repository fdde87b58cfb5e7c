import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.json_output import emit_json
from kitbag.cli.output import user_output
from kitbag.cli.rendering import render_browse_items
from kitbag.context import KitbagContext


@click.command("search")
@click.argument("query")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_obj
@cli_error_boundary
def search_cmd(ctx: KitbagContext, query: str, as_json: bool) -> None:
    """Search item names across all registered repositories."""
    results = ctx.catalog.search(query)

    if as_json:
        emit_json({"query": query, "repos": results})
        return

    if not results:
        user_output(f"No items matching '{query}'.")
        return

    for namespace, items in results.items():
        user_output(click.style(namespace, fg="cyan", bold=True))
        render_browse_items(items)
        user_output()
