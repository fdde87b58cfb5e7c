"""Production filesystem operations."""

import hashlib
import shutil
import stat
from pathlib import Path

from kitbag.gateway.files.abc import FileOps

EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class RealFileOps(FileOps):
    """FileOps backed by shutil and pathlib."""

    def copy_file(self, source: Path, dest: Path) -> str:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, dest)
        return hashlib.sha256(dest.read_bytes()).hexdigest()

    def make_executable(self, path: Path) -> None:
        mode = path.stat().st_mode
        path.chmod(mode | EXECUTABLE_BITS)

    def remove_file(self, path: Path) -> None:
        path.unlink()

    def remove_tree(self, path: Path) -> None:
        if path.exists():
            shutil.rmtree(path)
