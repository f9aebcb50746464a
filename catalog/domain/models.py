"""Catalog entities and list filters."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


class EventStatus:
    OPEN = "OPEN"
    ONGOING = "ONGOING"
    CLOSED = "CLOSED"


@dataclass(frozen=True)
class Race:
    id: int
    meeting_id: int
    name: str
    number: int
    visible: bool
    advertised_start_time: datetime


@dataclass(frozen=True)
class Event:
    id: int
    name: str
    venue_id: int
    sport_id: int
    participants_id: int
    advertised_start_time: datetime
    advertised_end_time: datetime
    # derived at read time, never stored
    status: str


@dataclass
class RaceFilter:
    meeting_ids: List[int] = field(default_factory=list)
    visible: Optional[bool] = None


@dataclass
class EventFilter:
    sport_id: Optional[int] = None
    status: Optional[str] = None
