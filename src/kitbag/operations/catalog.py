"""Catalog scanning: list and search installable items in repository mirrors."""

import logging
from pathlib import Path

import frontmatter
import yaml

from kitbag.errors import RepositoryNotFoundError
from kitbag.models.artifact import KIND_LAYOUTS, ArtifactKind, KindLayout, find_marker
from kitbag.models.catalog import BrowseItem
from kitbag.operations.registry import RepositoryRegistry

logger = logging.getLogger(__name__)


def read_description(markdown_file: Path) -> str | None:
    """Return the `description` frontmatter field of a markdown file.

    Missing frontmatter or a missing key yields None. Unparseable frontmatter
    is logged and also yields None.
    """
    # Gracefully handle YAML parsing errors (third-party API exception handling)
    try:
        post = frontmatter.load(str(markdown_file))
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        logger.warning("Could not read frontmatter of %s: %s", markdown_file, e)
        return None

    description = post.get("description")
    if description is None:
        return None
    return str(description).strip() or None


def _item_name(entry: Path, layout: KindLayout) -> str:
    if layout.is_directory:
        return entry.name
    return entry.name.removesuffix(layout.extension or "")


def _description_source(entry: Path, layout: KindLayout) -> Path | None:
    if layout.is_directory:
        return find_marker(entry, layout.marker) if layout.marker else None
    if layout.extension == ".md":
        return entry
    return None


def scan_mirror(mirror: Path, kind: ArtifactKind | None = None) -> list[BrowseItem]:
    """Walk the conventional kind directories of a mirror.

    Kinds are visited in enum order and entries in sorted order. A missing
    kind directory contributes no items.
    """
    items: list[BrowseItem] = []
    for candidate, layout in KIND_LAYOUTS.items():
        if kind is not None and candidate != kind:
            continue

        kind_dir = mirror / layout.directory
        if not kind_dir.is_dir():
            continue

        for entry in sorted(kind_dir.iterdir()):
            if not layout.matches(entry):
                continue
            source = _description_source(entry, layout)
            items.append(
                BrowseItem(
                    name=_item_name(entry, layout),
                    path=f"{layout.directory}/{entry.name}",
                    type=candidate,
                    description=read_description(source) if source is not None else None,
                )
            )
    return items


class CatalogScanner:
    """Read-only view over the items available in registered mirrors."""

    def __init__(self, registry: RepositoryRegistry) -> None:
        self._registry = registry

    def browse(self, namespace: str, kind: ArtifactKind | None = None) -> list[BrowseItem]:
        """List installable items in one repository.

        Raises:
            RepositoryNotFoundError: If namespace is not registered or its mirror is missing
        """
        self._registry.get(namespace)
        mirror = self._registry.mirror_path(namespace)
        if not mirror.is_dir():
            raise RepositoryNotFoundError(namespace)
        return scan_mirror(mirror, kind)

    def search(self, query: str) -> dict[str, list[BrowseItem]]:
        """Case-insensitive substring search on item names across all repositories.

        Returns a mapping of namespace to matching items, in registry order.
        Namespaces without matches are omitted.
        """
        needle = query.lower()
        results: dict[str, list[BrowseItem]] = {}
        for registration in self._registry.list_repositories():
            try:
                items = self.browse(registration.namespace)
            except RepositoryNotFoundError:
                logger.warning(
                    "Skipping %s: mirror missing at %s",
                    registration.namespace,
                    self._registry.mirror_path(registration.namespace),
                )
                continue

            matches = [item for item in items if needle in item.name.lower()]
            if matches:
                results[registration.namespace] = matches
        return results
