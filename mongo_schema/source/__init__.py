"""
Document sources for schema sampling.

Provides the abstract sampler interface and its MongoDB implementation.
"""

from mongo_schema.source.adapter import ConfigurationError, DocumentSource, SourceError
from mongo_schema.source.mongo import MongoDatabase, MongoDocumentSource, MongoSession, open_session

__all__ = [
    "ConfigurationError",
    "DocumentSource",
    "SourceError",
    "MongoDatabase",
    "MongoDocumentSource",
    "MongoSession",
    "open_session",
]
