"""REST endpoints for the live round."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from squad_grid.api.deps import get_round_machine
from squad_grid.errors import InvalidSelection

router = APIRouter(prefix="/api/round", tags=["round"])


class SelectCellRequest(BaseModel):
    team_index: int
    country_index: int


class GuessRequest(BaseModel):
    guess: str


@router.get("")
async def get_round(request: Request):
    """Current round state."""
    return get_round_machine(request).view()


@router.post("/select")
async def select_cell(request: Request, body: SelectCellRequest):
    """Start a round for a grid cell and resolve its player."""
    machine = get_round_machine(request)
    try:
        await machine.select_cell(body.team_index, body.country_index)
    except InvalidSelection as e:
        return JSONResponse(status_code=e.status_code, content={"error": str(e)})
    return machine.view()


@router.post("/guess")
async def submit_guess(request: Request, body: GuessRequest):
    """Submit a guess; ignored unless the round accepts guesses."""
    machine = get_round_machine(request)
    machine.submit_guess(body.guess)
    return machine.view()


@router.post("/reset")
async def reset_round(request: Request):
    """Clear the round."""
    machine = get_round_machine(request)
    machine.reset()
    return machine.view()
