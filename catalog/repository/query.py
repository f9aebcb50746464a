"""
List-query engine shared by the racing and sports repositories.

Builds `SELECT ... [WHERE ...] [ORDER BY ...]` plus bound parameters from a
filter and a free-form `orderBy` string. Nothing here touches the store.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..domain.models import EventFilter, EventStatus, RaceFilter
from ..domain.timestamps import format_timestamp, utcnow
from ..errors import InvalidOrderByError

logger = logging.getLogger(__name__)

RACES_LIST_SQL = """
SELECT
    id,
    meeting_id,
    name,
    number,
    visible,
    advertised_start_time
FROM races
""".strip()

EVENTS_LIST_SQL = """
SELECT
    id,
    name,
    venue_id,
    sport_id,
    participants_id,
    advertised_start_time,
    advertised_end_time
FROM events
""".strip()


class ColumnResolver:
    """Static external-field -> column table for one entity kind. Lookup is case-sensitive."""

    def __init__(self, mapping: Mapping[str, str]):
        self._mapping: Dict[str, str] = dict(mapping)

    def resolve(self, field_name: str) -> Optional[str]:
        return self._mapping.get(field_name)


def _with_json_names(columns: Iterable[str]) -> Dict[str, str]:
    # Both the protobuf field name and its lowerCamel JSON name are accepted.
    out: Dict[str, str] = {}
    for col in columns:
        head, *rest = col.split("_")
        out[col] = col
        out[head + "".join(p.capitalize() for p in rest)] = col
    return out


RACE_COLUMNS = ColumnResolver(_with_json_names(
    ["id", "meeting_id", "name", "number", "visible", "advertised_start_time"]
))

EVENT_COLUMNS = ColumnResolver(_with_json_names(
    ["id", "name", "venue_id", "sport_id", "participants_id", "advertised_start_time", "advertised_end_time"]
))

# derived, not a column: sorting by it is accepted and ignored
EVENT_UNSORTABLE = ("status",)


def in_clause(column: str, ids: Sequence[int]) -> Tuple[Optional[str], List[Any]]:
    if not ids:
        return None, []
    return f"{column} IN ({','.join(['?'] * len(ids))})", list(ids)


def bool_clause(column: str, flag: Optional[bool]) -> Optional[str]:
    # SQLite stores booleans as 0/1; a literal predicate needs no bound value
    if flag is None:
        return None
    return column if flag else f"NOT {column}"


def apply_filter(query: str, clauses: Sequence[str], args: Sequence[Any]) -> Tuple[str, List[Any]]:
    if clauses:
        query += " WHERE " + " AND ".join(clauses)
    return query, list(args)


def apply_order_by(query: str, order_by: Optional[str], resolver: ColumnResolver,
                   unsortable: Sequence[str] = ()) -> str:
    """
    Append ORDER BY for `"<field>"` or `"<field> <asc|desc>"`.

    Empty input is a no-op. More than two tokens, an unknown field or an order
    keyword other than asc/desc raise InvalidOrderByError.
    """
    params = (order_by or "").split()
    if not params:
        return query

    if len(params) > 2:
        raise InvalidOrderByError(f"invalid orderBy value: {order_by.strip()} Format is `fieldName desc`")

    field_name = params[0]
    order = None
    if len(params) == 2:
        order = params[1].upper()
        if order not in ("ASC", "DESC"):
            raise InvalidOrderByError(f"invalid sort order: {params[1]}. Choose either `asc` or `desc`")

    if field_name in unsortable:
        logger.debug("ignoring orderBy on derived field %s", field_name)
        return query

    column = resolver.resolve(field_name)
    if not column:
        raise InvalidOrderByError(f"unable to find the field name: {field_name}")

    clause = column if order is None else f"{column} {order}"
    return query + " ORDER BY " + clause


def race_filter_clauses(race_filter: Optional[RaceFilter]) -> Tuple[List[str], List[Any]]:
    clauses: List[str] = []
    args: List[Any] = []
    if race_filter is None:
        return clauses, args

    clause, ids = in_clause("meeting_id", race_filter.meeting_ids)
    if clause:
        clauses.append(clause)
        args.extend(ids)

    clause = bool_clause("visible", race_filter.visible)
    if clause:
        clauses.append(clause)

    return clauses, args


def event_filter_clauses(event_filter: Optional[EventFilter],
                         now: Optional[datetime] = None) -> Tuple[List[str], List[Any]]:
    clauses: List[str] = []
    args: List[Any] = []
    if event_filter is None:
        return clauses, args

    if event_filter.sport_id is not None:
        clauses.append("sport_id=?")
        args.append(event_filter.sport_id)

    if event_filter.status:
        status = event_filter.status.strip().upper()
        ts = format_timestamp(now or utcnow())
        if status == EventStatus.CLOSED:
            clauses.append("advertised_end_time < ?")
            args.append(ts)
        elif status == EventStatus.OPEN:
            clauses.append("advertised_start_time > ?")
            args.append(ts)
        elif status == EventStatus.ONGOING:
            clauses.append("advertised_start_time < ?")
            args.append(ts)
            clauses.append("advertised_end_time > ?")
            args.append(ts)
        else:
            # unknown keyword means "any status"
            logger.debug("ignoring unknown event status filter %r", event_filter.status)

    return clauses, args


def build_races_query(race_filter: Optional[RaceFilter], order_by: Optional[str]) -> Tuple[str, List[Any]]:
    clauses, args = race_filter_clauses(race_filter)
    query, args = apply_filter(RACES_LIST_SQL, clauses, args)
    return apply_order_by(query, order_by, RACE_COLUMNS), args


def build_events_query(event_filter: Optional[EventFilter], order_by: Optional[str],
                       now: Optional[datetime] = None) -> Tuple[str, List[Any]]:
    clauses, args = event_filter_clauses(event_filter, now)
    query, args = apply_filter(EVENTS_LIST_SQL, clauses, args)
    return apply_order_by(query, order_by, EVENT_COLUMNS, EVENT_UNSORTABLE), args
