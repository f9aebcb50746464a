"""
Wire messages for the racing and sports services.

JSON uses lowerCamel field names (`meetingIds`, `advertisedStartTime`); the
snake_case names are accepted on input as well.
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..domain.models import Event, EventFilter, Race, RaceFilter


class Message(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ===== racing =====
class ListRacesRequestFilter(Message):
    meeting_ids: list[int] = Field(default_factory=list)
    visible: bool | None = None

    def to_filter(self) -> RaceFilter:
        return RaceFilter(meeting_ids=list(self.meeting_ids), visible=self.visible)


class ListRacesRequest(Message):
    filter: ListRacesRequestFilter | None = None
    order_by: str = ""


class RaceMessage(Message):
    id: int
    meeting_id: int
    name: str
    number: int
    visible: bool
    advertised_start_time: datetime

    @classmethod
    def from_race(cls, race: Race) -> "RaceMessage":
        return cls(
            id=race.id,
            meeting_id=race.meeting_id,
            name=race.name,
            number=race.number,
            visible=race.visible,
            advertised_start_time=race.advertised_start_time,
        )


class ListRacesResponse(Message):
    races: list[RaceMessage] = Field(default_factory=list)


# ===== sports =====
class ListEventsRequestFilter(Message):
    sport_id: int | None = None
    status: str | None = None

    def to_filter(self) -> EventFilter:
        return EventFilter(sport_id=self.sport_id, status=self.status)


class ListEventsRequest(Message):
    filter: ListEventsRequestFilter | None = None
    order_by: str = ""


class EventMessage(Message):
    id: int
    name: str
    venue_id: int
    sport_id: int
    participants_id: int
    advertised_start_time: datetime
    advertised_end_time: datetime
    status: str

    @classmethod
    def from_event(cls, event: Event) -> "EventMessage":
        return cls(
            id=event.id,
            name=event.name,
            venue_id=event.venue_id,
            sport_id=event.sport_id,
            participants_id=event.participants_id,
            advertised_start_time=event.advertised_start_time,
            advertised_end_time=event.advertised_end_time,
            status=event.status,
        )


class ListEventsResponse(Message):
    events: list[EventMessage] = Field(default_factory=list)


class GetEventRequest(Message):
    id: int


class GetEventResponse(Message):
    event: EventMessage
