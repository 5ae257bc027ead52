"""Per-collection collector of field entries."""

from typing import List, Set

from mongo_schema.inference.types import FieldEntry, TypeTag


class SchemaAccumulator:
    """
    Ordered, deduplicating collection of field entries for one collection.

    The first type recorded for a path is kept; later observations of the
    same path are ignored. Each collection scan owns its own accumulator.
    """

    def __init__(self):
        self._entries: List[FieldEntry] = []
        self._seen: Set[str] = set()

    def add_if_absent(self, path: str, type_tag: TypeTag) -> bool:
        """
        Record ``path`` with ``type_tag`` unless the path is already known.

        Returns:
            True if a new entry was appended
        """
        if path in self._seen:
            return False
        self._seen.add(path)
        self._entries.append(FieldEntry(name=path, type=type_tag))
        return True

    def reset(self) -> None:
        """Forget every recorded entry."""
        self._entries.clear()
        self._seen.clear()

    @property
    def entries(self) -> List[FieldEntry]:
        """Entries in discovery order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: str) -> bool:
        return path in self._seen
