"""Artifact kinds and their on-disk layout."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ArtifactKind(Enum):
    """The four fixed artifact categories."""

    BUNDLE = "bundle"
    SNIPPET = "snippet"
    PROFILE = "profile"
    TRIGGER = "trigger"


@dataclass(frozen=True)
class KindLayout:
    """How one artifact kind looks in a mirror and where it lands when installed.

    Directory-style kinds are recognized by a marker file inside the entry
    directory and installed as a whole tree. File-style kinds are recognized by
    their extension and installed as a single file.
    """

    directory: str
    is_directory: bool
    marker: str | None
    extension: str | None
    executable: bool

    def matches(self, entry: Path) -> bool:
        """Return True if a directory entry has this kind's on-disk shape."""
        if self.is_directory:
            if not entry.is_dir() or self.marker is None:
                return False
            return find_marker(entry, self.marker) is not None
        if not entry.is_file() or self.extension is None:
            return False
        return entry.name.endswith(self.extension)


KIND_LAYOUTS: dict[ArtifactKind, KindLayout] = {
    ArtifactKind.BUNDLE: KindLayout(
        directory="bundles",
        is_directory=True,
        marker="BUNDLE.md",
        extension=None,
        executable=False,
    ),
    ArtifactKind.SNIPPET: KindLayout(
        directory="snippets",
        is_directory=False,
        marker=None,
        extension=".md",
        executable=False,
    ),
    ArtifactKind.PROFILE: KindLayout(
        directory="profiles",
        is_directory=False,
        marker=None,
        extension=".md",
        executable=False,
    ),
    ArtifactKind.TRIGGER: KindLayout(
        directory="triggers",
        is_directory=False,
        marker=None,
        extension=".sh",
        executable=True,
    ),
}


def find_marker(directory: Path, marker: str) -> Path | None:
    """Find a marker file in a directory, ignoring case."""
    wanted = marker.lower()
    for child in sorted(directory.iterdir()):
        if child.is_file() and child.name.lower() == wanted:
            return child
    return None


def kind_for_directory(segment: str) -> ArtifactKind | None:
    """Map a top-level directory name (e.g. "bundles") to its kind."""
    for kind, layout in KIND_LAYOUTS.items():
        if layout.directory == segment:
            return kind
    return None


def parse_kind(value: str) -> ArtifactKind:
    """Parse a user-supplied kind name, singular or plural.

    Raises:
        ValueError: If value names no known kind
    """
    normalized = value.strip().lower()
    for kind, layout in KIND_LAYOUTS.items():
        if normalized in (kind.value, layout.directory):
            return kind
    valid = ", ".join(layout.directory for layout in KIND_LAYOUTS.values())
    raise ValueError(f"Invalid type: {value} (use: {valid})")
