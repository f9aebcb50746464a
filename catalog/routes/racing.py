from __future__ import annotations

from fastapi import APIRouter, Request

from ..logs import LogContext
from ..services.messages import ListRacesRequest, ListRacesResponse
from .base import to_http_error

router = APIRouter()


@router.post("/v1/list-races", response_model=ListRacesResponse)
def api_list_races(body: ListRacesRequest, request: Request):
    state = request.app.state
    log = LogContext("LIST_RACES", state.config.log_db_path)
    log.set_payload(body.model_dump(by_alias=True))
    try:
        resp = state.racing_service.list_races(body)
        log.write("OK")
        return resp
    except Exception as e:
        log.write("ERROR", str(e))
        raise to_http_error(e)
