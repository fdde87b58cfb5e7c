"""Catalog browsing models."""

from dataclasses import dataclass

from kitbag.models.artifact import ArtifactKind


@dataclass(frozen=True)
class BrowseItem:
    """An installable item found by scanning a mirror."""

    name: str
    path: str  # relative to the mirror root, usable as the path of an install spec
    type: ArtifactKind
    description: str | None = None
