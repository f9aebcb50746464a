from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Callable, Iterable, List, Optional, TypeVar

from ..domain.event_status import event_status
from ..domain.models import Event, Race
from ..domain.timestamps import parse_timestamp
from ..errors import ScanError

T = TypeVar("T")


def _expect_columns(row: sqlite3.Row, n: int):
    if len(row) != n:
        raise ScanError(f"expected {n} columns, got {len(row)}")


def _required(row: sqlite3.Row, key: str):
    value = row[key]
    if value is None:
        raise ScanError(f"column {key} is NULL")
    return value


def scan_race(row: sqlite3.Row) -> Race:
    _expect_columns(row, 6)
    try:
        return Race(
            id=int(_required(row, "id")),
            meeting_id=int(_required(row, "meeting_id")),
            name=str(_required(row, "name")),
            number=int(_required(row, "number")),
            visible=bool(int(_required(row, "visible"))),
            advertised_start_time=parse_timestamp(_required(row, "advertised_start_time")),
        )
    except (IndexError, TypeError, ValueError) as e:
        raise ScanError(f"unable to scan race row: {e}") from e


def scan_event(row: sqlite3.Row, now: Optional[datetime] = None) -> Event:
    """Map one events row; status is derived against `now`, defaulting to the clock at scan time."""
    _expect_columns(row, 7)
    try:
        start = parse_timestamp(_required(row, "advertised_start_time"))
        end = parse_timestamp(_required(row, "advertised_end_time"))
        return Event(
            id=int(_required(row, "id")),
            name=str(_required(row, "name")),
            venue_id=int(_required(row, "venue_id")),
            sport_id=int(_required(row, "sport_id")),
            participants_id=int(_required(row, "participants_id")),
            advertised_start_time=start,
            advertised_end_time=end,
            status=event_status(start, end, now),
        )
    except (IndexError, TypeError, ValueError) as e:
        raise ScanError(f"unable to scan event row: {e}") from e


def scan_all(rows: Iterable[sqlite3.Row], scanner: Callable[[sqlite3.Row], T]) -> List[T]:
    return [scanner(r) for r in rows]
