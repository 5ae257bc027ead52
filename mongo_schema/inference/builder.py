"""
Collection and database schema builders.

Drive the document walker over a sample of each collection and assemble
the per-collection schemas into a database schema.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from mongo_schema.common.logging_config import track_duration
from mongo_schema.config.settings import get_settings
from mongo_schema.inference.accumulator import SchemaAccumulator
from mongo_schema.inference.types import FieldEntry
from mongo_schema.inference.walker import DocumentWalker
from mongo_schema.source.adapter import DocumentSource

logger = logging.getLogger(__name__)

CollectionSchema = List[FieldEntry]
DatabaseSchema = Dict[str, CollectionSchema]


def sort_schema(entries: List[FieldEntry], preserve_first_entry: bool = False) -> CollectionSchema:
    """
    Sort entries by field name.

    Args:
        entries: Entries in discovery order
        preserve_first_entry: Leave the first discovered entry in place and
            sort only the rest (legacy output ordering)

    Returns:
        New sorted list
    """
    if preserve_first_entry and len(entries) > 1:
        return entries[:1] + sorted(entries[1:], key=lambda entry: entry.name)
    return sorted(entries, key=lambda entry: entry.name)


class CollectionSchemaBuilder:
    """Builds the schema of one collection from a document sample."""

    def __init__(
        self,
        sample_size: Optional[int] = None,
        preserve_first_entry: Optional[bool] = None,
    ):
        settings = get_settings()

        if sample_size is None:
            sample_size = settings.max_try_records
        # pymongo treats limit(0) as unlimited and a negative limit as one batch
        if sample_size <= 0:
            raise ValueError(f"sample_size must be positive, got {sample_size}")
        self.sample_size = sample_size

        if preserve_first_entry is None:
            preserve_first_entry = settings.preserve_first_entry
        self.preserve_first_entry = preserve_first_entry

    def build(self, source: DocumentSource) -> CollectionSchema:
        """
        Sample ``source`` and return its sorted schema.

        Raises:
            SourceError: If the sample cannot be retrieved
        """
        accumulator = SchemaAccumulator()
        walker = DocumentWalker(accumulator, max_elements=self.sample_size)

        documents = source.sample(self.sample_size)
        if not documents:
            return []

        for document in documents:
            walker.walk("", document)

        logger.debug(
            f"Sampled {len(documents)} documents, found {len(accumulator)} fields")
        return sort_schema(accumulator.entries, self.preserve_first_entry)


class DatabaseSchemaBuilder:
    """Builds schemas for every collection of a database."""

    def __init__(self, collection_builder: Optional[CollectionSchemaBuilder] = None):
        self.collection_builder = collection_builder or CollectionSchemaBuilder()

    def build(
        self,
        list_collections: Callable[[], Iterable[str]],
        source_for: Callable[[str], DocumentSource],
        exclude: Iterable[str] = (),
    ) -> DatabaseSchema:
        """
        Build a schema for each listed collection.

        Args:
            list_collections: Returns the collection names to scan
            source_for: Returns the document source for a collection name
            exclude: Collection names to skip

        Returns:
            Mapping of collection name to schema, in listing order

        Raises:
            SourceError: If listing or sampling fails; no partial result is returned
        """
        excluded = set(exclude)
        schemas: DatabaseSchema = {}

        for name in list_collections():
            if name in excluded:
                logger.info(f"Skipping excluded collection {name}")
                continue
            with track_duration("collection_scan", logger, collection=name) as scan:
                schemas[name] = self.collection_builder.build(source_for(name))
                scan["fields"] = len(schemas[name])

        logger.info(f"Extracted schemas for {len(schemas)} collections")
        return schemas
