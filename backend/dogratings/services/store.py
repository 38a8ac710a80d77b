"""Record store — in-memory tables standing in for the persistence layer."""

import itertools
import threading
from typing import Any, Iterable, Optional

import structlog

from dogratings.exceptions import RecordNotFoundError, RecordNotUniqueError

logger = structlog.get_logger()

# Unique indexes enforced on insert: record type -> attributes
DEFAULT_UNIQUE_INDEXES: dict[str, tuple[str, ...]] = {
    "Dog": ("license",),
}


class InMemoryStore:
    """Holds saved records per record type, keyed by auto-incrementing id.

    Unique indexes are checked on every insert and reject duplicates with
    ``RecordNotUniqueError``. This is the backstop for the best-effort
    uniqueness validator. Like a SQL unique index, NULL values never conflict.
    """

    def __init__(self, unique_indexes: Optional[dict[str, Iterable[str]]] = None):
        indexes = DEFAULT_UNIQUE_INDEXES if unique_indexes is None else unique_indexes
        self.unique_indexes = {k: tuple(v) for k, v in indexes.items()}
        self._tables: dict[str, dict[int, Any]] = {}
        self._ids = itertools.count(1)
        # Serializes the unique-index check with the write
        self._lock = threading.Lock()

    def _table(self, record_type: str) -> dict[int, Any]:
        return self._tables.get(record_type, {})

    def insert(self, record) -> bool:
        """Persist a record and assign its id. Returns True on success."""
        with self._lock:
            return self._insert(record)

    def _insert(self, record) -> bool:
        table = self._tables.setdefault(record.record_type, {})

        for attribute in self.unique_indexes.get(record.record_type, ()):
            value = record.read_attribute(attribute)
            if value is not None and self.exists_with_value(
                record.record_type, attribute, value, exclude_id=record.id
            ):
                logger.warning(
                    "unique_index_violation",
                    record_type=record.record_type,
                    attribute=attribute,
                )
                raise RecordNotUniqueError(record.record_type, attribute, value)

        if record.id is None:
            record.id = next(self._ids)
        table[record.id] = record
        logger.debug("record_inserted", record_type=record.record_type, record_id=record.id)
        return True

    def find(self, record_type: str, record_id: Any) -> Optional[Any]:
        """Return the record with this id, or None."""
        return self._table(record_type).get(record_id)

    def get(self, record_type: str, record_id: Any):
        """Like ``find`` but raises ``RecordNotFoundError``."""
        record = self.find(record_type, record_id)
        if record is None:
            raise RecordNotFoundError(record_type, record_id)
        return record

    def where(self, record_type: str, **conditions: Any) -> list:
        """Records of a type whose attributes equal every condition, in id order."""
        return [
            record
            for _, record in sorted(self._table(record_type).items())
            if all(record.read_attribute(k) == v for k, v in conditions.items())
        ]

    def all(self, record_type: str) -> list:
        return self.where(record_type)

    def exists_with_value(
        self, record_type: str, attribute: str, value: Any, exclude_id: Optional[int] = None
    ) -> bool:
        """True if a saved record other than ``exclude_id`` has ``attribute == value``."""
        for record_id, record in list(self._table(record_type).items()):
            if record_id == exclude_id:
                continue
            if record.read_attribute(attribute) == value:
                return True
        return False

    def count(self, record_type: Optional[str] = None) -> int:
        if record_type is not None:
            return len(self._table(record_type))
        return sum(len(t) for t in self._tables.values())

    def counts(self) -> dict[str, int]:
        return {name: len(table) for name, table in self._tables.items()}

    def clear(self) -> None:
        self._tables.clear()
