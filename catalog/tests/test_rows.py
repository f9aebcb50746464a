import sqlite3
from datetime import datetime, timezone

import pytest

from catalog.domain.models import EventStatus
from catalog.errors import ScanError
from catalog.repository.rows import scan_all, scan_event, scan_race

NOW = datetime(2026, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture()
def conn():
    c = sqlite3.connect(":memory:")
    c.row_factory = sqlite3.Row
    yield c
    c.close()


def _race_row(conn, start="2026-05-01T10:00:00Z", visible=1):
    return conn.execute(
        "SELECT 7 AS id, 3 AS meeting_id, 'Perth Hawks' AS name, 2 AS number, "
        "? AS visible, ? AS advertised_start_time",
        (visible, start),
    ).fetchone()


def _event_row(conn, start, end):
    return conn.execute(
        "SELECT 9 AS id, 'Sydney Storm' AS name, 4 AS venue_id, 5 AS sport_id, "
        "6 AS participants_id, ? AS advertised_start_time, ? AS advertised_end_time",
        (start, end),
    ).fetchone()


def test_scan_race(conn):
    race = scan_race(_race_row(conn, visible=0))
    assert race.id == 7 and race.meeting_id == 3 and race.number == 2
    assert race.name == "Perth Hawks"
    assert race.visible is False
    assert race.advertised_start_time == datetime(2026, 5, 1, 10, 0, 0, tzinfo=timezone.utc)


def test_scan_event_derives_status(conn):
    row = _event_row(conn, "2026-05-01T11:00:00Z", "2026-05-01T13:00:00Z")
    event = scan_event(row, now=NOW)
    assert event.status == EventStatus.ONGOING
    assert (event.venue_id, event.sport_id, event.participants_id) == (4, 5, 6)

    row = _event_row(conn, "2026-05-01T12:00:00Z", "2026-05-01T13:00:00Z")
    assert scan_event(row, now=NOW).status == EventStatus.CLOSED


def test_unparsable_timestamp_is_fatal(conn):
    with pytest.raises(ScanError):
        scan_race(_race_row(conn, start="not a time"))
    with pytest.raises(ScanError):
        scan_event(_event_row(conn, "2026-05-01T11:00:00Z", None), now=NOW)


def test_wrong_column_count_is_fatal(conn):
    row = conn.execute("SELECT 1 AS id, 'x' AS name").fetchone()
    with pytest.raises(ScanError, match="expected 6 columns"):
        scan_race(row)
    with pytest.raises(ScanError, match="expected 7 columns"):
        scan_event(row)


def test_wrong_column_type_is_fatal(conn):
    row = conn.execute(
        "SELECT 'abc' AS id, 3 AS meeting_id, 'n' AS name, 2 AS number, 1 AS visible, "
        "'2026-05-01T10:00:00Z' AS advertised_start_time"
    ).fetchone()
    with pytest.raises(ScanError):
        scan_race(row)


def test_scan_all_empty_is_empty_list():
    assert scan_all([], scan_race) == []


def test_null_name_is_fatal(conn):
    row = conn.execute(
        "SELECT 9 AS id, NULL AS name, 4 AS venue_id, 5 AS sport_id, 6 AS participants_id, "
        "'2026-05-01T11:00:00Z' AS advertised_start_time, '2026-05-01T13:00:00Z' AS advertised_end_time"
    ).fetchone()
    with pytest.raises(ScanError, match="column name is NULL"):
        scan_event(row, now=NOW)

    row = conn.execute(
        "SELECT 7 AS id, 3 AS meeting_id, NULL AS name, 2 AS number, 1 AS visible, "
        "'2026-05-01T10:00:00Z' AS advertised_start_time"
    ).fetchone()
    with pytest.raises(ScanError, match="column name is NULL"):
        scan_race(row)


def test_null_visible_is_fatal(conn):
    row = _race_row(conn, visible=None)
    with pytest.raises(ScanError, match="column visible is NULL"):
        scan_race(row)
