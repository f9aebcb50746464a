"""
Demo data for both catalogs.

Tables are created if missing and rows are inserted with INSERT OR IGNORE keyed
on id, so seeding an already-seeded database changes nothing but the pinned
upcoming race.
"""
from __future__ import annotations

import random
from datetime import datetime, timedelta
from sqlite3 import Connection
from typing import Optional

from ..domain.timestamps import format_timestamp, utcnow

RACES_DDL = """
CREATE TABLE IF NOT EXISTS races (
    id INTEGER PRIMARY KEY,
    meeting_id INTEGER,
    name TEXT,
    number INTEGER,
    visible INTEGER,
    advertised_start_time DATETIME
)
"""

EVENTS_DDL = """
CREATE TABLE IF NOT EXISTS events (
    id INTEGER PRIMARY KEY,
    name TEXT,
    venue_id INTEGER,
    sport_id INTEGER,
    participants_id INTEGER,
    advertised_start_time DATETIME,
    advertised_end_time DATETIME
)
"""

_PLACES = [
    "Albany", "Ballarat", "Bendigo", "Cairns", "Darwin", "Geelong", "Hobart", "Ipswich",
    "Launceston", "Mackay", "Newcastle", "Orange", "Perth", "Rockhampton", "Sydney", "Toowoomba",
    "Wagga", "Warrnambool", "Adelaide", "Brisbane",
]
_MASCOTS = [
    "Bulldogs", "Comets", "Eagles", "Falcons", "Giants", "Hawks", "Kings", "Lions",
    "Magpies", "Panthers", "Raiders", "Rockets", "Sharks", "Storm", "Tigers", "Wolves",
]


def team_name(rng: random.Random) -> str:
    return f"{rng.choice(_PLACES)} {rng.choice(_MASCOTS)}"


def _between(rng: random.Random, lo: datetime, hi: datetime) -> datetime:
    span = int((hi - lo).total_seconds())
    return lo + timedelta(seconds=rng.randint(0, span))


def seed_races(conn: Connection, count: int = 100, rng: Optional[random.Random] = None,
               now: Optional[datetime] = None):
    rng = rng or random.Random()
    now = now or utcnow()
    conn.execute(RACES_DDL)
    for i in range(1, count + 1):
        conn.execute(
            "INSERT OR IGNORE INTO races(id, meeting_id, name, number, visible, advertised_start_time) "
            "VALUES (?,?,?,?,?,?)",
            (
                i,
                rng.randint(1, 10),
                team_name(rng),
                rng.randint(1, 12),
                rng.randint(0, 1),
                format_timestamp(_between(rng, now - timedelta(days=1), now + timedelta(days=2))),
            ),
        )
    if count > 0:
        set_future_start_time(conn, count, now)


def set_future_start_time(conn: Connection, race_id: int, now: Optional[datetime] = None):
    """Push one race's start `race_id` minutes plus an hour ahead so the catalog always has an upcoming race."""
    now = now or utcnow()
    future = now + timedelta(minutes=race_id, hours=1)
    conn.execute(
        "UPDATE races SET advertised_start_time=? WHERE id=?",
        (format_timestamp(future), race_id),
    )


def seed_events(conn: Connection, count: int = 100, rng: Optional[random.Random] = None,
                now: Optional[datetime] = None):
    rng = rng or random.Random()
    now = now or utcnow()
    conn.execute(EVENTS_DDL)
    for i in range(1, count + 1):
        conn.execute(
            "INSERT OR IGNORE INTO events(id, name, venue_id, sport_id, participants_id, "
            "advertised_start_time, advertised_end_time) VALUES (?,?,?,?,?,?,?)",
            (
                i,
                team_name(rng),
                rng.randint(1, 30),
                rng.randint(1, 20),
                rng.randint(1, 10),
                format_timestamp(_between(rng, now - timedelta(days=5), now + timedelta(days=2))),
                format_timestamp(_between(rng, now + timedelta(days=3), now + timedelta(days=5))),
            ),
        )
