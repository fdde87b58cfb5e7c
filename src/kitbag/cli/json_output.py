"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from kitbag.cli.output import machine_output


def _serialize_for_json(obj: Any) -> Any:
    """Recursively serialize special types for JSON.

    Handles Path, datetime, Enum, dataclass and pydantic model instances that
    appear in plain dict structures. Pydantic models use
    model_dump(mode="json") so they match the persisted document shapes.

    Args:
        obj: Object to serialize

    Returns:
        JSON-serializable version of the object
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        # Shallow field walk; asdict() would deep-copy nested pydantic models
        return {f.name: _serialize_for_json(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, dict):
        return {key: _serialize_for_json(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_serialize_for_json(item) for item in obj]
    return obj


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    Routes JSON through machine_output() so data stays on stdout while
    warnings go to stderr.

    Args:
        data: Dictionary to serialize as JSON
    """
    serialized = _serialize_for_json(data)
    machine_output(json.dumps(serialized, indent=2))
