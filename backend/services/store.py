"""In-memory, append-only photo store. No database needed.

Records are deduplicated by their ``id`` field: the first record seen with a
given id wins and is never updated or removed afterwards.

Note: Each uvicorn worker has its own store instance. With --workers 2,
every worker polls the upstream source and holds its own copy.
"""

import threading
from typing import Any, Iterable

ID_FIELD = "id"


class RecordStore:
    def __init__(self):
        self._records: list[dict[str, Any]] = []
        self._ids: set[Any] = set()
        self._lock = threading.Lock()

    def add_many(self, records: Iterable[dict[str, Any]]) -> int:
        """Append records whose id is not stored yet. Returns how many were added."""
        added = 0
        with self._lock:
            for record in records:
                key = _identifier(record)
                if key in self._ids:
                    continue
                self._ids.add(key)
                self._records.append(record)
                added += 1
        return added

    def snapshot(self) -> list[dict[str, Any]]:
        """Shallow copy of the current contents, in insertion order."""
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, identifier: Any) -> bool:
        with self._lock:
            return _hashable(identifier) in self._ids


def _identifier(record: dict[str, Any]) -> Any:
    return _hashable(record.get(ID_FIELD))


def _hashable(value: Any) -> Any:
    # JSON true and 1 are different ids; 1 and 1.0 are the same number.
    if isinstance(value, bool):
        return ("bool", value)
    # Upstream ids are scalars; anything else is keyed by its repr.
    try:
        hash(value)
    except TypeError:
        return ("unhashable", repr(value))
    return value
