from __future__ import annotations

from fastapi import APIRouter, Request

from ..logs import LogContext
from ..services.messages import GetEventRequest, GetEventResponse, ListEventsRequest, ListEventsResponse
from .base import to_http_error

router = APIRouter()


@router.post("/v1/list-events", response_model=ListEventsResponse)
def api_list_events(body: ListEventsRequest, request: Request):
    state = request.app.state
    log = LogContext("LIST_EVENTS", state.config.log_db_path)
    log.set_payload(body.model_dump(by_alias=True))
    try:
        resp = state.sports_service.list_events(body)
        log.write("OK")
        return resp
    except Exception as e:
        log.write("ERROR", str(e))
        raise to_http_error(e)


@router.get("/v1/events/{event_id}", response_model=GetEventResponse)
def api_get_event(event_id: int, request: Request):
    state = request.app.state
    log = LogContext("GET_EVENT", state.config.log_db_path)
    log.set_entity("EVENT", str(event_id))
    try:
        resp = state.sports_service.get_event(GetEventRequest(id=event_id))
        log.write("OK")
        return resp
    except Exception as e:
        log.write("ERROR", str(e))
        raise to_http_error(e)
