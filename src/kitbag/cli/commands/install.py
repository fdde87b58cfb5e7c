import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.output import user_output, warning_output
from kitbag.context import KitbagContext
from kitbag.operations.spec_parser import parse_install_spec


@click.command("install")
@click.argument("spec")
@click.option("--force", is_flag=True, help="Overwrite existing files not managed by kitbag.")
@click.pass_obj
@cli_error_boundary
def install_cmd(ctx: KitbagContext, spec: str, force: bool) -> None:
    """Install a package from a registered repository.

    SPEC has the form namespace:path[@version], for example
    acme-tool:bundles/greeter or acme-tool:triggers/pre-commit.sh.
    """
    parsed = parse_install_spec(spec)
    if parsed.version is not None:
        warning_output(
            f"version pinning is not supported; installing the current commit "
            f"of {parsed.namespace} instead of '{parsed.version}'"
        )

    package = ctx.manager.install(spec, force=force)

    user_output(click.style("✓ ", fg="green") + f"Installed {package.name}")
    user_output(f"  Type:      {package.type.value}")
    user_output(f"  Version:   {package.version.ref} ({package.version.short_sha})")
    user_output(f"  Files:     {len(package.files)}")
    for installed_file in package.files:
        user_output(f"    {installed_file.target}")
