import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.json_output import emit_json
from kitbag.cli.output import user_output
from kitbag.cli.rendering import TIMESTAMP_FORMAT
from kitbag.context import KitbagContext


@click.command("info")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_obj
@cli_error_boundary
def info_cmd(ctx: KitbagContext, name: str, as_json: bool) -> None:
    """Show details of an installed package."""
    package = ctx.manager.get(name)

    if as_json:
        emit_json({"package": package})
        return

    user_output(f"Name:          {package.name}")
    user_output(f"Original Name: {package.original_name}")
    user_output(f"Type:          {package.type.value}")
    user_output(f"Namespace:     {package.namespace}")
    user_output(f"Source Path:   {package.source_path}")
    user_output(f"Version SHA:   {package.version.sha}")
    user_output(f"Version Ref:   {package.version.ref}")
    user_output(f"Installed At:  {package.installed_at.strftime(TIMESTAMP_FORMAT)}")
    user_output(f"Updated At:    {package.updated_at.strftime(TIMESTAMP_FORMAT)}")
    user_output(f"Files:         {len(package.files)}")

    if package.files:
        user_output("\nInstalled Files:")
        for installed_file in package.files:
            user_output(f"  Source: {installed_file.source}")
            user_output(f"  Target: {installed_file.target}")
            user_output(f"  SHA:    {installed_file.sha}")
            user_output()
