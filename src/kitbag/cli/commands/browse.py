import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.json_output import emit_json
from kitbag.cli.output import user_output, warning_output
from kitbag.cli.rendering import render_browse_items
from kitbag.context import KitbagContext
from kitbag.errors import RepositoryNotFoundError
from kitbag.models.artifact import ArtifactKind, parse_kind
from kitbag.models.catalog import BrowseItem


@click.command("browse")
@click.argument("namespace", required=False)
@click.option(
    "--type",
    "-t",
    "kind_name",
    default=None,
    help="Only show one kind: bundles, snippets, profiles or triggers.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_obj
@cli_error_boundary
def browse_cmd(
    ctx: KitbagContext,
    namespace: str | None,
    kind_name: str | None,
    as_json: bool,
) -> None:
    """List installable items in registered repositories.

    Browses every registered repository when NAMESPACE is omitted.
    """
    kind: ArtifactKind | None = parse_kind(kind_name) if kind_name else None

    results: dict[str, list[BrowseItem]] = {}
    if namespace is not None:
        namespaces = [namespace]
        results[namespace] = ctx.catalog.browse(namespace, kind)
    else:
        namespaces = [r.namespace for r in ctx.registry.list_repositories()]
        for ns in namespaces:
            try:
                results[ns] = ctx.catalog.browse(ns, kind)
            except RepositoryNotFoundError:
                warning_output(f"mirror of {ns} is missing; run: kitbag repo remove {ns}")

    if as_json:
        emit_json({"repos": results})
        return

    if not namespaces:
        user_output("No repositories registered.")
        user_output("Add one with: kitbag repo add gh:owner/repo")
        return

    for ns, items in results.items():
        user_output(click.style(ns, fg="cyan", bold=True))
        if not items:
            user_output("  (no items)")
            continue
        render_browse_items(items)
        user_output(f"Install with: kitbag install {ns}:<path>")
        user_output()
