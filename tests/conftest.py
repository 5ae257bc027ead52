# Test configuration

import pytest
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mongo_schema.inference.types import FieldEntry, TypeTag  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from MONGO_SCHEMA_* variables and the settings cache."""
    from mongo_schema.config.settings import get_settings

    for key in list(os.environ):
        if key.upper().startswith("MONGO_SCHEMA_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_schema():
    """A database schema with one populated and one empty collection."""
    return {
        "users": [
            FieldEntry("_id", TypeTag.OBJECT_ID),
            FieldEntry("name", TypeTag.STRING),
            FieldEntry("tags", TypeTag.ARRAY),
            FieldEntry("tags[]", TypeTag.STRING),
        ],
        "empty": [],
    }
