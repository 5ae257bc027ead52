"""
Abstract interface for document sources.

A document source hands the schema builder a bounded sample of one
collection's documents.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import List


class ConfigurationError(Exception):
    """Exception raised for an unusable connection string."""
    pass


class SourceError(Exception):
    """Exception raised when the database cannot be reached or queried."""
    pass


class DocumentSource(ABC):
    """
    Abstract base class for collection samplers.

    Implementations return the most recently inserted documents first.
    """

    @abstractmethod
    def sample(self, limit: int) -> List[Mapping]:
        """
        Fetch up to ``limit`` decoded documents.

        Args:
            limit: Maximum number of documents to return

        Returns:
            List of documents, newest first. An empty list means the
            collection has no documents and is not an error.

        Raises:
            SourceError: If the documents cannot be retrieved
        """
        pass
