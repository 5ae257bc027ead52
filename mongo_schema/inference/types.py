"""
Field type classification for decoded BSON values.

Maps the Python values produced by pymongo's BSON decoder onto a small,
closed set of value kinds, and those kinds onto the type tags written to
the schema report.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict

from bson.code import Code
from bson.datetime_ms import DatetimeMS
from bson.decimal128 import Decimal128
from bson.objectid import ObjectId
from bson.timestamp import Timestamp


class TypeTag(str, Enum):
    """Type labels written to the schema report."""
    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    STRING = "STRING"
    BOOL = "BOOL"
    TIME = "TIME"
    OBJECT_ID = "OBJECTID"
    BINARY = "BINARY"
    ARRAY = "ARRAY"
    UNKNOWN = "UNKNOWN"


class ValueKind(str, Enum):
    """Shape of a decoded value, as seen by the document walker."""
    NULL = "null"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    BOOL = "bool"
    TIME = "time"
    IDENTIFIER = "identifier"
    BYTES = "bytes"
    DOCUMENT = "document"
    ARRAY = "array"
    OTHER = "other"


# NULL and DOCUMENT are absent: nulls are skipped, documents are expanded.
_KIND_TAGS: Dict[ValueKind, TypeTag] = {
    ValueKind.INTEGER: TypeTag.INTEGER,
    ValueKind.FLOAT: TypeTag.DECIMAL,
    ValueKind.TEXT: TypeTag.STRING,
    ValueKind.BOOL: TypeTag.BOOL,
    ValueKind.TIME: TypeTag.TIME,
    ValueKind.IDENTIFIER: TypeTag.OBJECT_ID,
    ValueKind.BYTES: TypeTag.BINARY,
    ValueKind.ARRAY: TypeTag.ARRAY,
    ValueKind.OTHER: TypeTag.UNKNOWN,
}


@dataclass(frozen=True)
class FieldEntry:
    """One field path of a collection schema and its inferred type."""
    name: str
    type: TypeTag

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "type": self.type.value}


def detect_value_kind(value: Any) -> ValueKind:
    """
    Detect the kind of a decoded BSON value.

    bool is a subclass of int and Code is a subclass of str, so both are
    tested before their base types. Int64 is an int, Binary is bytes,
    SON is a Mapping.

    Args:
        value: The value to check

    Returns:
        ValueKind enum value
    """
    if value is None:
        return ValueKind.NULL
    elif isinstance(value, bool):
        return ValueKind.BOOL
    elif isinstance(value, int):
        return ValueKind.INTEGER
    elif isinstance(value, (float, Decimal128)):
        return ValueKind.FLOAT
    elif isinstance(value, Code):
        return ValueKind.OTHER
    elif isinstance(value, str):
        return ValueKind.TEXT
    elif isinstance(value, (datetime, DatetimeMS, Timestamp)):
        return ValueKind.TIME
    elif isinstance(value, ObjectId):
        return ValueKind.IDENTIFIER
    elif isinstance(value, (bytes, bytearray)):
        return ValueKind.BYTES
    elif isinstance(value, Mapping):
        return ValueKind.DOCUMENT
    elif isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    else:
        return ValueKind.OTHER


def type_tag_for(kind: ValueKind) -> TypeTag:
    """
    Map a value kind to its report type tag.

    Raises:
        ValueError: For NULL and DOCUMENT, which never produce an entry
    """
    try:
        return _KIND_TAGS[kind]
    except KeyError:
        raise ValueError(f"{kind.value} values are not classified") from None


def classify_value(value: Any) -> TypeTag:
    """Classify a single non-null, non-document value."""
    return type_tag_for(detect_value_kind(value))
