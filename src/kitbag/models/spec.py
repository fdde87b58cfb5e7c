"""Parsed form of a namespace:path[@version] install spec."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InstallSpec:
    """Parsed form of namespace:path[@version]. Never persisted."""

    namespace: str
    path: str
    version: str | None = None

    def format(self) -> str:
        """Render the canonical spec string."""
        text = f"{self.namespace}:{self.path}"
        if self.version is not None:
            text += f"@{self.version}"
        return text
