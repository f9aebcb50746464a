from __future__ import annotations

import logging

from ..repository.races_repo import RacesRepo
from .messages import ListRacesRequest, ListRacesResponse, RaceMessage

logger = logging.getLogger(__name__)


class RacingService:
    """Adapter between racing wire messages and RacesRepo."""

    def __init__(self, races_repo: RacesRepo):
        self.races_repo = races_repo

    def list_races(self, request: ListRacesRequest) -> ListRacesResponse:
        race_filter = request.filter.to_filter() if request.filter else None
        races = self.races_repo.list(race_filter, request.order_by)
        logger.debug("list_races returned %d races", len(races))
        return ListRacesResponse(races=[RaceMessage.from_race(r) for r in races])
