from fastapi import APIRouter, HTTPException

from .. import __version__
from ..errors import InvalidOrderByError, NotFoundError, NotInitializedError

router = APIRouter()

APP_NAME = "racing-sports-catalog"


@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/version")
def version():
    return {"app": APP_NAME, "version": __version__}


def to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, InvalidOrderByError):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, NotInitializedError):
        return HTTPException(status_code=503, detail=str(e))
    return HTTPException(status_code=500, detail=str(e))
