"""Service lookup from application state."""

from fastapi import Request

from squad_grid.config import settings
from squad_grid.models.grid import Grid
from squad_grid.services.football_data_client import FootballDataClient
from squad_grid.services.player_resolver import PlayerResolver
from squad_grid.services.round_machine import RoundStateMachine


def ensure_services(state) -> None:
    """Create any missing service on app state from settings."""
    if not hasattr(state, "client"):
        state.client = FootballDataClient(
            api_key=settings.football_data_api_key,
            base_url=settings.football_data_base_url,
            timeout=settings.request_timeout,
        )
    if not hasattr(state, "resolver"):
        state.resolver = PlayerResolver(
            state.client,
            grid=Grid(),
            team_lookup=settings.team_lookup,
        )
    if not hasattr(state, "round_machine"):
        state.round_machine = RoundStateMachine(state.resolver)


def get_resolver(request: Request) -> PlayerResolver:
    """Get the player resolver for the grid."""
    ensure_services(request.app.state)
    return request.app.state.resolver


def get_round_machine(request: Request) -> RoundStateMachine:
    """Get the state machine owning the live round."""
    ensure_services(request.app.state)
    return request.app.state.round_machine
