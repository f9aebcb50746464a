from __future__ import annotations

from datetime import datetime

from .models import EventStatus
from .timestamps import utcnow


def event_status(start: datetime, end: datetime, now: datetime | None = None) -> str:
    """
    OPEN when the event starts strictly after now, ONGOING when it started strictly
    before now and ends strictly after now, CLOSED otherwise (start == now included).
    """
    now = now or utcnow()
    if start > now:
        return EventStatus.OPEN
    if start < now and end > now:
        return EventStatus.ONGOING
    return EventStatus.CLOSED
