"""Whole-document JSON persistence shared by the ledger and the registry.

Documents are always read and written in full. Writes go to a temporary file
that is renamed over the target, so a crash never leaves a half-written file.
There is no locking: two processes writing the same document race and the last
writer wins.
"""

import json
from pathlib import Path

from pydantic import BaseModel


def read_json_document[M: BaseModel](path: Path, model: type[M]) -> M | None:
    """Load a document, or return None if the file does not exist.

    Raises:
        pydantic.ValidationError: If the file is not valid JSON for the model
    """
    if not path.exists():
        return None
    return model.model_validate_json(path.read_text(encoding="utf-8"))


def write_json_document(path: Path, document: BaseModel) -> None:
    """Write a document atomically, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(path.suffix + ".tmp")

    data = document.model_dump(mode="json")
    with temp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")

    temp_path.replace(path)
