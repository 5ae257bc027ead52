"""
Recursive field walker.

Turns a decoded document into flat (path, type) entries. Nested documents
contribute only their descendants; arrays contribute an ARRAY entry for
themselves plus entries for their elements under ``path[]``.
"""

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from mongo_schema.inference.accumulator import SchemaAccumulator
from mongo_schema.inference.paths import child_path, element_path
from mongo_schema.inference.types import TypeTag, ValueKind, detect_value_kind, type_tag_for
from mongo_schema.config.settings import get_settings

logger = logging.getLogger(__name__)


class DocumentWalker:
    """
    Walks documents into a SchemaAccumulator.

    Traversal uses an explicit stack instead of recursion. Children are
    pushed in reverse, so discovery order matches a depth-first walk.
    """

    def __init__(self, accumulator: SchemaAccumulator, max_elements: Optional[int] = None):
        """
        Initialize walker.

        Args:
            accumulator: Collector receiving the discovered entries
            max_elements: Maximum number of elements inspected per array

        Raises:
            ValueError: If max_elements is not positive
        """
        if max_elements is None:
            max_elements = get_settings().max_try_records
        if max_elements <= 0:
            raise ValueError(f"max_elements must be positive, got {max_elements}")

        self.accumulator = accumulator
        self.max_elements = max_elements

    def walk(self, prefix: str, document: Mapping) -> None:
        """
        Record every field of ``document`` under ``prefix``.

        Args:
            prefix: Path of the document itself ("" for a top-level document)
            document: Decoded document
        """
        stack: List[Tuple[str, Any]] = []
        self._push_fields(stack, prefix, document)

        while stack:
            path, value = stack.pop()
            kind = detect_value_kind(value)

            if kind == ValueKind.NULL:
                continue

            if kind == ValueKind.DOCUMENT:
                self._push_fields(stack, path, value)
                continue

            tag = type_tag_for(kind)
            self.accumulator.add_if_absent(path, tag)

            if kind == ValueKind.ARRAY:
                items_path = element_path(path)
                for item in reversed(value[:self.max_elements]):
                    stack.append((items_path, item))
            elif tag == TypeTag.UNKNOWN:
                logger.warning(
                    f"{path}: unknown field type {type(value).__name__}",
                    extra={"extra_fields": {"field": path, "python_type": type(value).__name__}},
                )

    def _push_fields(self, stack: List[Tuple[str, Any]], prefix: str, document: Mapping) -> None:
        for name, value in reversed(list(document.items())):
            stack.append((child_path(prefix, name), value))
