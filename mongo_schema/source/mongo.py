"""
MongoDB document source built on pymongo.

Provides the session context manager used by the CLI, plus the collection
lister and per-collection samplers consumed by the schema builders.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List

from pymongo import DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import ConfigurationError as PyMongoConfigurationError
from pymongo.errors import InvalidURI, PyMongoError

from mongo_schema.source.adapter import ConfigurationError, DocumentSource, SourceError

logger = logging.getLogger(__name__)


class MongoDocumentSource(DocumentSource):
    """Samples a collection by descending ``_id``, newest documents first."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def sample(self, limit: int) -> List[dict]:
        try:
            cursor = self.collection.find({}).sort("_id", DESCENDING).limit(limit)
            return list(cursor)
        except PyMongoError as e:
            raise SourceError(
                f"Failed to sample collection {self.collection.name}: {e}") from e


class MongoDatabase:
    """Collection lister and source factory for one database."""

    def __init__(self, database: Database):
        self.database = database

    @property
    def name(self) -> str:
        return self.database.name

    def list_collection_names(self) -> List[str]:
        try:
            return self.database.list_collection_names()
        except PyMongoError as e:
            raise SourceError(
                f"Failed to list collections of {self.database.name}: {e}") from e

    def source_for(self, collection_name: str) -> MongoDocumentSource:
        return MongoDocumentSource(self.database[collection_name])


@dataclass
class MongoSession:
    """An open client bound to the database named in the connection string."""
    client: MongoClient
    database_name: str
    database: MongoDatabase


@contextmanager
def open_session(connection_string: str, server_selection_timeout_ms: int = 5000) -> Iterator[MongoSession]:
    """
    Connect to the database named in ``connection_string``.

    The client is closed when the block exits, including on errors.

    Args:
        connection_string: MongoDB URI, e.g. "mongodb://localhost:27017/meteor"
        server_selection_timeout_ms: How long to wait for a reachable server

    Raises:
        ConfigurationError: If the URI cannot be parsed or names no database
        SourceError: If no server can be reached
    """
    try:
        client = MongoClient(
            connection_string,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
    except (InvalidURI, PyMongoConfigurationError, ValueError) as e:
        raise ConfigurationError(f"Invalid connection string: {e}") from e

    try:
        try:
            database = client.get_default_database()
        except PyMongoConfigurationError as e:
            raise ConfigurationError(
                "Please specify database name in the connection string") from e

        try:
            client.admin.command("ping")
        except PyMongoError as e:
            raise SourceError(f"Failed to connect to MongoDB: {e}") from e

        logger.info(f"Connected to database {database.name}")
        yield MongoSession(
            client=client,
            database_name=database.name,
            database=MongoDatabase(database),
        )
    finally:
        client.close()
