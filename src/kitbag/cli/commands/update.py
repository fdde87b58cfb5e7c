import click

from kitbag.cli.error_boundary import cli_error_boundary
from kitbag.cli.json_output import emit_json
from kitbag.cli.output import user_output, warning_output
from kitbag.cli.rendering import render_updates
from kitbag.context import KitbagContext
from kitbag.errors import KitbagError


@click.command("update")
@click.argument("names", nargs=-1)
@click.option("--apply", "apply_updates", is_flag=True, help="Install available updates.")
@click.option("--json", "as_json", is_flag=True, help="Output the update check as JSON.")
@click.pass_obj
@cli_error_boundary
def update_cmd(
    ctx: KitbagContext,
    names: tuple[str, ...],
    apply_updates: bool,
    as_json: bool,
) -> None:
    """Check installed packages for updates, and optionally apply them.

    Checks every installed package when no NAMES are given.
    """
    if as_json and apply_updates:
        raise click.UsageError("--json cannot be combined with --apply")

    if as_json:
        report = ctx.manager.check_updates(names)
        emit_json({"updates": report.updates, "failures": report.failures})
        return

    user_output("Checking for updates...")
    report = ctx.manager.check_updates(names)

    for name, reason in report.failures.items():
        warning_output(f"could not check {name}: {reason}")

    if not report.updates and not report.failures:
        user_output("No packages to check.")
        return

    if not report.available:
        user_output("All packages are up to date.")
        return

    user_output(f"\n{len(report.available)} package(s) have updates available:\n")
    render_updates(report.available)

    if not apply_updates:
        user_output("\nRun with --apply to install updates:")
        user_output("  kitbag update --apply")
        return

    user_output("\nApplying updates...")
    updated = 0
    for info in report.available:
        try:
            ctx.manager.update(info.package.name)
        except KitbagError as e:
            warning_output(f"failed to update {info.package.name}: {e}")
            continue
        user_output(f"  Updated {info.package.name}")
        updated += 1

    user_output(f"\nUpdated {updated} of {len(report.available)} packages.")
