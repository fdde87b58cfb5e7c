import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.output import error_output, user_output
from kitbag.context import KitbagContext


@click.command("add")
@click.argument("url")
@click.option(
    "--namespace",
    "-n",
    default=None,
    help="Namespace to register under (default: derived from owner/repo).",
)
@click.pass_obj
@cli_error_boundary
def add_repo(ctx: KitbagContext, url: str, namespace: str | None) -> None:
    """Register a repository and clone it locally.

    URL is gh:owner/repo or https://github.com/owner/repo.
    """
    if not ctx.git.is_installed():
        error_output("Error: git is not installed or not on PATH")
        raise SystemExit(1)

    user_output(f"Cloning {url}...")
    registration = ctx.registry.add(url, namespace)

    user_output(click.style("✓ ", fg="green") + f"Registered {registration.url}")
    user_output(f"  Namespace: {click.style(registration.namespace, fg='cyan')}")
    user_output(f"  Branch:    {registration.default_branch}")
    user_output()
    user_output(f"Browse it with: kitbag browse {registration.namespace}")
