"""Output utilities for CLI commands with clear intent.

- user_output: human-readable progress and results (stdout)
- error_output: warnings and diagnostics (stderr)
- machine_output: structured data such as JSON (stdout)
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Print a human-facing message to stdout."""
    click.echo(message, nl=nl)


def error_output(message: str = "") -> None:
    """Print a warning or diagnostic to stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Print machine-readable data to stdout."""
    click.echo(message)


def warning_output(message: str) -> None:
    error_output(click.style("Warning: ", fg="yellow") + message)
