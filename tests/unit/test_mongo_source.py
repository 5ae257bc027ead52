"""
Unit tests for the pymongo-backed document source and session handling.
"""

from unittest.mock import MagicMock, patch

import pytest
from pymongo import DESCENDING
from pymongo.errors import (
    ConfigurationError as PyMongoConfigurationError,
    InvalidURI,
    OperationFailure,
    ServerSelectionTimeoutError,
)

from mongo_schema.source.adapter import ConfigurationError, SourceError
from mongo_schema.source.mongo import MongoDatabase, MongoDocumentSource, open_session


@pytest.fixture
def collection():
    collection = MagicMock()
    collection.name = "users"
    return collection


class TestMongoDocumentSource:
    """Tests for sampling a collection."""

    def test_sample_newest_first(self, collection):
        documents = [{"_id": 2}, {"_id": 1}]
        collection.find.return_value.sort.return_value.limit.return_value = iter(documents)

        result = MongoDocumentSource(collection).sample(100)

        assert result == documents
        collection.find.assert_called_once_with({})
        collection.find.return_value.sort.assert_called_once_with("_id", DESCENDING)
        collection.find.return_value.sort.return_value.limit.assert_called_once_with(100)

    def test_empty_collection(self, collection):
        collection.find.return_value.sort.return_value.limit.return_value = iter([])

        assert MongoDocumentSource(collection).sample(100) == []

    def test_query_failure_raises_source_error(self, collection):
        collection.find.side_effect = OperationFailure("not authorized")

        with pytest.raises(SourceError, match="users"):
            MongoDocumentSource(collection).sample(100)


class TestMongoDatabase:
    """Tests for listing collections."""

    def test_list_collection_names(self):
        database = MagicMock()
        database.list_collection_names.return_value = ["a", "b"]

        assert MongoDatabase(database).list_collection_names() == ["a", "b"]

    def test_list_failure_raises_source_error(self):
        database = MagicMock()
        database.name = "meteor"
        database.list_collection_names.side_effect = OperationFailure("denied")

        with pytest.raises(SourceError, match="meteor"):
            MongoDatabase(database).list_collection_names()

    def test_source_for(self):
        database = MagicMock()

        source = MongoDatabase(database).source_for("orders")

        assert isinstance(source, MongoDocumentSource)
        database.__getitem__.assert_called_once_with("orders")


class TestOpenSession:
    """Tests for connection setup and release."""

    @pytest.fixture
    def client(self):
        with patch("mongo_schema.source.mongo.MongoClient") as client_cls:
            client = client_cls.return_value
            client.get_default_database.return_value.name = "meteor"
            yield client

    def test_yields_session_and_closes(self, client):
        with open_session("mongodb://localhost:3001/meteor") as session:
            assert session.database_name == "meteor"
            assert session.database.name == "meteor"
            client.close.assert_not_called()

        client.admin.command.assert_called_once_with("ping")
        client.close.assert_called_once()

    def test_closes_on_error_inside_block(self, client):
        with pytest.raises(SourceError):
            with open_session("mongodb://localhost:3001/meteor"):
                raise SourceError("find failed")

        client.close.assert_called_once()

    def test_missing_database_name(self, client):
        client.get_default_database.side_effect = PyMongoConfigurationError(
            "No default database name defined or provided.")

        with pytest.raises(ConfigurationError, match="database name"):
            with open_session("mongodb://localhost:3001"):
                pass

        client.admin.command.assert_not_called()
        client.close.assert_called_once()

    def test_unreachable_server(self, client):
        client.admin.command.side_effect = ServerSelectionTimeoutError("timed out")

        with pytest.raises(SourceError):
            with open_session("mongodb://localhost:3001/meteor"):
                pass

        client.close.assert_called_once()

    def test_invalid_uri_from_client(self):
        with patch("mongo_schema.source.mongo.MongoClient", side_effect=InvalidURI("bad")):
            with pytest.raises(ConfigurationError):
                with open_session("mongodb://"):
                    pass

    def test_passes_server_selection_timeout(self):
        with patch("mongo_schema.source.mongo.MongoClient") as client_cls:
            client_cls.return_value.get_default_database.return_value.name = "db"
            with open_session("mongodb://h/db", server_selection_timeout_ms=250):
                pass

        client_cls.assert_called_once_with("mongodb://h/db", serverSelectionTimeoutMS=250)

    def test_unparseable_uri(self):
        with pytest.raises(ConfigurationError):
            with open_session("mongodb://localhost:notaport/meteor"):
                pass
