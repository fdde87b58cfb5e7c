"""Persistence for the installed-package ledger (installed.json)."""

from abc import ABC, abstractmethod
from pathlib import Path

from kitbag.io.json_document import read_json_document, write_json_document
from kitbag.models.ledger import LedgerDocument

LEDGER_FILE_NAME = "installed.json"


class PackageLedger(ABC):
    """Abstract interface for loading and saving the ledger document.

    The ledger is the single source of truth for what is installed. Callers
    load the whole document, derive a new one and save it back in full.
    """

    @abstractmethod
    def load(self) -> LedgerDocument:
        """Load the ledger, returning an empty document if none exists."""
        ...

    @abstractmethod
    def save(self, document: LedgerDocument) -> None:
        """Replace the persisted ledger with document."""
        ...


class FilesystemPackageLedger(PackageLedger):
    """Ledger stored as a JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LedgerDocument:
        document = read_json_document(self._path, LedgerDocument)
        if document is None:
            return LedgerDocument()
        return document

    def save(self, document: LedgerDocument) -> None:
        write_json_document(self._path, document)
