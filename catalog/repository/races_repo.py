from __future__ import annotations

import random
from typing import List, Optional

from ..db import get_conn
from ..domain.models import Race, RaceFilter
from .base import CatalogRepo
from .query import build_races_query
from .rows import scan_all, scan_race
from .seeds import seed_races


class RacesRepo(CatalogRepo):
    """Read access to the races table."""

    name = "races"

    def __init__(self, db_path: str, seed_count: int = 100, rng: Optional[random.Random] = None):
        super().__init__(db_path, seed_count)
        self._rng = rng

    def seed(self):
        with get_conn(self.db_path) as conn:
            seed_races(conn, self.seed_count, self._rng)

    def list(self, race_filter: Optional[RaceFilter] = None, order_by: str = "") -> List[Race]:
        self._require_ready()
        # validation errors surface here, before the store is touched
        query, args = build_races_query(race_filter, order_by)
        with get_conn(self.db_path) as conn:
            rows = conn.execute(query, args).fetchall()
        return scan_all(rows, scan_race)
