"""
Schema report output.

Provides the JSON and CSV writers for extracted database schemas.
"""

from mongo_schema.export.writers import (
    CSV_FORMAT,
    JSON_FORMAT,
    ExportError,
    export_schema,
    normalize_format,
    schema_to_dict,
    write_csv,
    write_json,
)

__all__ = [
    "CSV_FORMAT",
    "JSON_FORMAT",
    "ExportError",
    "export_schema",
    "normalize_format",
    "schema_to_dict",
    "write_csv",
    "write_json",
]
