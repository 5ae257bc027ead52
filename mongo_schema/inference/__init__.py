"""
Schema inference for sampled MongoDB documents.

Provides type classification, field path composition, the document walker
and the collection/database schema builders.
"""

from mongo_schema.inference.types import (
    FieldEntry,
    TypeTag,
    ValueKind,
    classify_value,
    detect_value_kind,
    type_tag_for,
)
from mongo_schema.inference.paths import child_path, element_path
from mongo_schema.inference.accumulator import SchemaAccumulator
from mongo_schema.inference.walker import DocumentWalker
from mongo_schema.inference.builder import (
    CollectionSchema,
    CollectionSchemaBuilder,
    DatabaseSchema,
    DatabaseSchemaBuilder,
    sort_schema,
)

__all__ = [  # ruff: noqa: RUF022
    # Classification
    "FieldEntry",
    "TypeTag",
    "ValueKind",
    "classify_value",
    "detect_value_kind",
    "type_tag_for",
    # Paths
    "child_path",
    "element_path",
    # Walking
    "SchemaAccumulator",
    "DocumentWalker",
    # Building
    "CollectionSchema",
    "CollectionSchemaBuilder",
    "DatabaseSchema",
    "DatabaseSchemaBuilder",
    "sort_schema",
]
