from __future__ import annotations

import logging

from ..repository.sports_repo import SportsRepo
from .messages import (
    EventMessage,
    GetEventRequest,
    GetEventResponse,
    ListEventsRequest,
    ListEventsResponse,
)

logger = logging.getLogger(__name__)


class SportsService:
    """Adapter between sports wire messages and SportsRepo."""

    def __init__(self, sports_repo: SportsRepo):
        self.sports_repo = sports_repo

    def list_events(self, request: ListEventsRequest) -> ListEventsResponse:
        event_filter = request.filter.to_filter() if request.filter else None
        events = self.sports_repo.list_events(event_filter, request.order_by)
        logger.debug("list_events returned %d events", len(events))
        return ListEventsResponse(events=[EventMessage.from_event(e) for e in events])

    def get_event(self, request: GetEventRequest) -> GetEventResponse:
        event = self.sports_repo.get_event_by_id(request.id)
        return GetEventResponse(event=EventMessage.from_event(event))
