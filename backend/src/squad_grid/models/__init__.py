"""Data models for the squad grid game."""

from squad_grid.models.grid import DEFAULT_COUNTRIES, DEFAULT_TEAMS, Grid
from squad_grid.models.round import MAX_ATTEMPTS, Round, RoundStatus
from squad_grid.models.team import SquadMember, Team

__all__ = [
    "DEFAULT_COUNTRIES",
    "DEFAULT_TEAMS",
    "Grid",
    "MAX_ATTEMPTS",
    "Round",
    "RoundStatus",
    "SquadMember",
    "Team",
]
