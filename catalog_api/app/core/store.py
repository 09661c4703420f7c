"""
In‑memory record storage.

Each resource collection (users, products) is held by a
:class:`RecordStore`: an insertion‑ordered mapping from integer id to a
record dictionary, a monotonic id counter and a lock.  A single
:class:`Stores` container is created per application by
:func:`init_stores`, attached to ``app.state`` and handed to the
service layer through FastAPI dependencies, so every route touching a
collection sees the same instance.

Nothing here is durable; records live for the lifetime of the process.
"""

from __future__ import annotations

import copy
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from fastapi import Request


logger = logging.getLogger(__name__)

Record = Dict[str, Any]


SEED_PRODUCTS: List[Record] = [
    {"name": "Laptop", "price": 1200.0},
    {"name": "Mouse", "price": 25.0},
    {"name": "Teclado", "price": 50.0},
    {"name": "Monitor", "price": 300.0},
    {"name": "Webcam", "price": 80.0},
    {"name": "Auriculares", "price": 150.0},
    {"name": "Teclado Gaming", "price": 120.0},
    {"name": "Mouse Gaming", "price": 60.0},
]

SEED_USERS: List[Record] = [
    {"name": "Juan Pérez", "email": "juan@example.com", "age": 25},
    {"name": "María González", "email": "maria@example.com", "age": 30},
    {"name": "Carlos López", "email": "carlos@example.com", "age": 22},
]


class RecordStore:
    """Ordered collection of records keyed by an auto‑assigned id.

    New ids are one greater than the largest id ever assigned, starting
    at 1 for an empty store.  Deleting the newest record does not make
    its id available again.

    The lock is re‑entrant so that callers can wrap a check‑then‑write
    sequence in :meth:`transaction` and still use the ordinary methods
    inside it.  Records are copied on the way in and out; callers never
    hold a reference into the store.
    """

    def __init__(self, name: str, records: Optional[Iterable[Record]] = None) -> None:
        self.name = name
        self._records: Dict[int, Record] = {}
        self._last_id = 0
        self._lock = threading.RLock()
        for record in records or ():
            self.insert(record)

    @contextmanager
    def transaction(self) -> Iterator["RecordStore"]:
        with self._lock:
            yield self

    def all(self) -> List[Record]:
        with self._lock:
            return [dict(record) for record in self._records.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def get(self, record_id: int) -> Optional[Record]:
        with self._lock:
            record = self._records.get(record_id)
            return dict(record) if record is not None else None

    def find(self, predicate: Callable[[Record], bool]) -> Optional[Record]:
        """Return the first record for which ``predicate`` is true."""
        with self._lock:
            for record in self._records.values():
                if predicate(record):
                    return dict(record)
            return None

    def insert(self, fields: Record) -> Record:
        with self._lock:
            self._last_id += 1
            record = {"id": self._last_id}
            record.update(copy.deepcopy({k: v for k, v in fields.items() if k != "id"}))
            self._records[self._last_id] = record
            return dict(record)

    def update(self, record_id: int, fields: Record) -> Optional[Record]:
        """Merge ``fields`` into an existing record.

        Returns the updated record, or ``None`` if ``record_id`` is
        unknown.  The id itself cannot be changed.
        """
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return None
            record.update({k: v for k, v in fields.items() if k != "id"})
            return dict(record)

    def delete(self, record_id: int) -> Optional[Record]:
        with self._lock:
            return self._records.pop(record_id, None)

    def __len__(self) -> int:
        return self.count()


@dataclass
class Stores:
    """One store per resource type, shared by all routes of an app."""

    users: RecordStore = field(default_factory=lambda: RecordStore("users"))
    products: RecordStore = field(default_factory=lambda: RecordStore("products"))


def init_stores(seed: bool = True) -> Stores:
    """Create the application's stores, optionally with demo records."""
    if not seed:
        return Stores()
    stores = Stores(
        users=RecordStore("users", SEED_USERS),
        products=RecordStore("products", SEED_PRODUCTS),
    )
    logger.info(
        "Seeded %d users and %d products", stores.users.count(), stores.products.count()
    )
    return stores


def get_stores(request: Request) -> Stores:
    """FastAPI dependency returning the stores attached to the running app."""
    return request.app.state.stores
