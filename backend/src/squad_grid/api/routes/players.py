"""REST endpoints for grid configuration and player lookup."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from squad_grid.api.deps import get_resolver
from squad_grid.errors import SquadGridError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["players"])


class PlayerInfo(BaseModel):
    id: Optional[int] = None
    name: str
    nationality: str
    position: Optional[str] = None
    date_of_birth: Optional[str] = None


class GetPlayerResponse(BaseModel):
    player: PlayerInfo


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _text_field(payload: Any, key: str) -> str:
    """String value of ``key`` in a JSON object body, or "" when absent or not text."""
    if not isinstance(payload, dict):
        return ""
    value = payload.get(key)
    return value.strip() if isinstance(value, str) else ""


@router.get("/grid")
async def get_grid(request: Request):
    """Teams (rows) and countries (columns) of the grid."""
    return get_resolver(request).grid.to_dict()


@router.post("/get-player", response_model=GetPlayerResponse)
async def get_player(request: Request):
    """Pick a random player of ``country`` from ``team``'s squad.

    Body: ``{"team": str, "country": str}``. A missing, non-JSON or
    non-text body is answered with 400 rather than a validation error.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    team = _text_field(payload, "team")
    country = _text_field(payload, "country")
    if not team or not country:
        return error_response(400, "Country and team are required.")

    resolver = get_resolver(request)
    try:
        player = await resolver.find_player(team, country)
    except SquadGridError as e:
        kind = getattr(e, "kind", type(e).__name__)
        logger.warning(f"Player lookup for {team} / {country} failed [{kind}]: {e}")
        return error_response(e.status_code, str(e))

    return GetPlayerResponse(player=PlayerInfo(**player.to_dict()))
