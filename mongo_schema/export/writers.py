"""
Schema report writers.

JSON: one object keyed by collection name, each value a list of
{"name", "type"} objects.
CSV: one (collection, field, type) row per field, no header, collections
without fields omitted.
"""

import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from mongo_schema.inference.builder import DatabaseSchema

JSON_FORMAT = "json"
CSV_FORMAT = "csv"
FORMATS = (JSON_FORMAT, CSV_FORMAT)


class ExportError(Exception):
    """Exception raised when a schema report cannot be written."""
    pass


def normalize_format(fmt: Optional[str]) -> str:
    """Return ``fmt`` if it is a known format, otherwise JSON."""
    if fmt and fmt.lower() in FORMATS:
        return fmt.lower()
    return JSON_FORMAT


def schema_to_dict(schema: DatabaseSchema) -> Dict[str, List[Dict[str, Any]]]:
    return {
        collection: [entry.to_dict() for entry in entries]
        for collection, entries in schema.items()
    }


def write_json(path: Union[str, Path], schema: DatabaseSchema, indent: Optional[int] = None) -> None:
    """Write the schema as a single JSON object."""
    separators = None if indent else (",", ":")
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(schema_to_dict(schema), f, indent=indent, separators=separators)
    except OSError as e:
        raise ExportError(f"Failed to write {path}: {e}") from e


def write_csv(path: Union[str, Path], schema: DatabaseSchema) -> None:
    """Write the schema as headerless (collection, field, type) rows."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            for collection, entries in schema.items():
                for entry in entries:
                    writer.writerow([collection, entry.name, entry.type.value])
    except OSError as e:
        raise ExportError(f"Failed to write {path}: {e}") from e


def export_schema(
    path: Union[str, Path],
    schema: DatabaseSchema,
    fmt: str = JSON_FORMAT,
    indent: Optional[int] = None,
) -> str:
    """
    Write ``schema`` to ``path`` in the requested format.

    Unknown formats fall back to JSON.

    Returns:
        The format actually written

    Raises:
        ExportError: If the file cannot be created or written
    """
    fmt = normalize_format(fmt)
    if fmt == CSV_FORMAT:
        write_csv(path, schema)
    else:
        write_json(path, schema, indent=indent)
    return fmt
