"""Production Git implementation using subprocess."""

import shutil
import subprocess
from pathlib import Path

from kitbag.errors import VersionControlError
from kitbag.gateway.git.abc import Git
from kitbag.subprocess_utils import run_subprocess_with_context

REMOTE_HEAD_REF = "refs/remotes/origin/HEAD"
FALLBACK_BRANCHES = ("main", "master")


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def is_installed(self) -> bool:
        return shutil.which("git") is not None

    def clone(self, url: str, dest: Path, *, shallow: bool = True) -> None:
        cmd = ["git", "clone", "--quiet"]
        if shallow:
            cmd.extend(["--depth", "1"])
        cmd.extend([url, str(dest)])
        run_subprocess_with_context(cmd, operation_context=f"clone {url}")

    def pull(self, repo_path: Path, *, ff_only: bool = True) -> None:
        cmd = ["git", "-C", str(repo_path), "pull", "--quiet"]
        if ff_only:
            cmd.append("--ff-only")
        run_subprocess_with_context(cmd, operation_context=f"pull {repo_path}")

    def fetch(self, repo_path: Path) -> None:
        run_subprocess_with_context(
            ["git", "-C", str(repo_path), "fetch", "--quiet"],
            operation_context=f"fetch {repo_path}",
        )

    def current_commit(self, repo_path: Path) -> str:
        result = run_subprocess_with_context(
            ["git", "-C", str(repo_path), "rev-parse", "HEAD"],
            operation_context=f"resolve HEAD in {repo_path}",
        )
        return result.stdout.strip()

    def remote_commit(self, repo_path: Path, branch: str) -> str:
        result = run_subprocess_with_context(
            ["git", "-C", str(repo_path), "rev-parse", f"origin/{branch}"],
            operation_context=f"resolve origin/{branch} in {repo_path}",
        )
        return result.stdout.strip()

    def default_branch(self, repo_path: Path) -> str:
        result = subprocess.run(
            ["git", "-C", str(repo_path), "symbolic-ref", REMOTE_HEAD_REF],
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode == 0:
            # refs/remotes/origin/main -> main
            ref = result.stdout.strip()
            if ref:
                return ref.rsplit("/", 1)[-1]

        for candidate in FALLBACK_BRANCHES:
            probe = subprocess.run(
                [
                    "git",
                    "-C",
                    str(repo_path),
                    "show-ref",
                    "--verify",
                    "--quiet",
                    f"refs/remotes/origin/{candidate}",
                ],
                capture_output=True,
                check=False,
            )
            if probe.returncode == 0:
                return candidate

        raise VersionControlError(
            f"detect default branch of {repo_path}",
            ["git", "-C", str(repo_path), "symbolic-ref", REMOTE_HEAD_REF],
            result.returncode,
            "origin/HEAD is not set and neither origin/main nor origin/master exists",
        )

    def changed_files(self, repo_path: Path, from_ref: str, to_ref: str) -> list[str]:
        result = run_subprocess_with_context(
            ["git", "-C", str(repo_path), "diff", "--name-only", from_ref, to_ref],
            operation_context=f"diff {from_ref}..{to_ref} in {repo_path}",
        )
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]
