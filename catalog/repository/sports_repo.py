from __future__ import annotations

import random
from typing import List, Optional

from ..db import get_conn
from ..domain.models import Event, EventFilter
from ..errors import NotFoundError
from .base import CatalogRepo
from .query import EVENTS_LIST_SQL, build_events_query
from .rows import scan_all, scan_event
from .seeds import seed_events


class SportsRepo(CatalogRepo):
    """Read access to the sports events table."""

    name = "sports"

    def __init__(self, db_path: str, seed_count: int = 100, rng: Optional[random.Random] = None):
        super().__init__(db_path, seed_count)
        self._rng = rng

    def seed(self):
        with get_conn(self.db_path) as conn:
            seed_events(conn, self.seed_count, self._rng)

    def list_events(self, event_filter: Optional[EventFilter] = None, order_by: str = "") -> List[Event]:
        self._require_ready()
        query, args = build_events_query(event_filter, order_by)
        with get_conn(self.db_path) as conn:
            rows = conn.execute(query, args).fetchall()
        return scan_all(rows, scan_event)

    def get_event_by_id(self, event_id: int) -> Event:
        self._require_ready()
        with get_conn(self.db_path) as conn:
            row = conn.execute(EVENTS_LIST_SQL + " WHERE id=?", (event_id,)).fetchone()
        if row is None:
            raise NotFoundError("event", event_id)
        return scan_event(row)
