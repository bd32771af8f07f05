"""Business logic services."""

from squad_grid.services.football_data_client import FootballDataClient
from squad_grid.services.player_resolver import PlayerResolver, candidates
from squad_grid.services.round_machine import RoundStateMachine

__all__ = [
    "FootballDataClient",
    "PlayerResolver",
    "RoundStateMachine",
    "candidates",
]
