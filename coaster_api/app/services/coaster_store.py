"""
In-memory coaster store.

The store is the single piece of shared mutable state in the
application.  One instance is created per application and handed to
request handlers through a FastAPI dependency.  Handlers run in
worker threads, so every read and write goes through one
``threading.Lock``.  The lock is only held while the dictionary is
touched; callers receive copies and serialise them without it.

Records are never evicted and writes are never rejected.  Data lives
for the lifetime of the process.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Dict, List, Optional

from coaster_api.app.schemas.coaster import Coaster, CoasterCreate


logger = logging.getLogger(__name__)


class CoasterStore:
    """Thread-safe mapping from coaster id to :class:`Coaster`."""

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._lock = threading.Lock()
        self._coasters: Dict[str, Coaster] = {}
        self._clock = clock
        self._last_id = 0

    def _next_id(self) -> str:
        # Caller holds the lock.  Two writes within one clock tick get
        # consecutive values, so ids are strictly increasing.
        value = max(self._clock(), self._last_id + 1)
        self._last_id = value
        return str(value)

    def put(self, data: CoasterCreate) -> str:
        """Store a new coaster and return its freshly assigned id."""
        with self._lock:
            coaster_id = self._next_id()
            self._coasters[coaster_id] = Coaster(id=coaster_id, **data.model_dump(by_alias=True))
        logger.info("Created coaster %s", coaster_id)
        return coaster_id

    def get(self, coaster_id: str) -> Optional[Coaster]:
        """Return the coaster stored under ``coaster_id`` or ``None``."""
        with self._lock:
            return self._coasters.get(coaster_id)

    def list(self) -> List[Coaster]:
        """Return a snapshot of all coasters in no particular order."""
        with self._lock:
            return list(self._coasters.values())

    def ids(self) -> List[str]:
        """Return a snapshot of all stored ids."""
        with self._lock:
            return list(self._coasters)

    def __len__(self) -> int:
        with self._lock:
            return len(self._coasters)
