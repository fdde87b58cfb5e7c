from kitbag.gateway.files.abc import FileOps
from kitbag.gateway.files.real import RealFileOps

__all__ = ["FileOps", "RealFileOps"]
