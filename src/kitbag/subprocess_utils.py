"""Subprocess execution with rich error context.

Wraps subprocess.run() so every failing external command surfaces as a
VersionControlError carrying the command, exit status and stderr text.
"""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from kitbag.errors import VersionControlError

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting for the gateway layer.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        VersionControlError: If command fails or its binary is not found
    """
    cmd_list = [str(arg) for arg in cmd]
    logger.debug("Running %s (cwd=%s)", " ".join(cmd_list), cwd)

    try:
        return subprocess.run(
            cmd_list,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=check,
            **kwargs,
        )
    except subprocess.CalledProcessError as e:
        stderr_text = e.stderr if isinstance(e.stderr, str) else ""
        raise VersionControlError(
            operation_context,
            cmd_list,
            e.returncode,
            stderr_text.strip(),
        ) from e
    except FileNotFoundError as e:
        raise VersionControlError(
            operation_context,
            cmd_list,
            None,
            f"Command not found: {cmd_list[0]}",
        ) from e
