"""Collaborators a validation run may consult.

Rules stay pure functions of the record plus these read-only lookups.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from dogratings.services.store import InMemoryStore
from dogratings.validators.reference_data import UsGeography


class RecordLookup(Protocol):
    """Read side of the persistence layer, as seen by validators."""

    def exists_with_value(
        self, record_type: str, attribute: str, value: Any, exclude_id: Optional[int] = None
    ) -> bool:
        ...

    def find(self, record_type: str, record_id: Any) -> Optional[Any]:
        ...


class Geography(Protocol):
    """Geography lookup used by the license state check."""

    def valid_state_abbreviation(self, code: str) -> bool:
        ...


@dataclass
class ValidationContext:
    """Lookups handed to every validator during one run."""

    store: RecordLookup = field(default_factory=InMemoryStore)
    geography: Geography = field(default_factory=UsGeography)
