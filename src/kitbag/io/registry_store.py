"""Persistence for repository registrations (repos.json)."""

from abc import ABC, abstractmethod
from pathlib import Path

from kitbag.io.json_document import read_json_document, write_json_document
from kitbag.models.registry import RegistryDocument

REGISTRY_FILE_NAME = "repos.json"


class RegistryStore(ABC):
    """Abstract interface for loading and saving the registry document."""

    @abstractmethod
    def load(self) -> RegistryDocument:
        """Load the registry, returning an empty document if none exists."""
        ...

    @abstractmethod
    def save(self, document: RegistryDocument) -> None:
        """Replace the persisted registry with document."""
        ...


class FilesystemRegistryStore(RegistryStore):
    """Registry stored as a JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> RegistryDocument:
        document = read_json_document(self._path, RegistryDocument)
        if document is None:
            return RegistryDocument()
        return document

    def save(self, document: RegistryDocument) -> None:
        write_json_document(self._path, document)
