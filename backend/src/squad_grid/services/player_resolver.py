"""Resolve a (team, nationality) cell to a random squad member."""

import logging
import random
from typing import Literal, Optional

from squad_grid.errors import NoMatch, ResolutionError
from squad_grid.models.grid import Grid
from squad_grid.models.team import SquadMember, Team
from squad_grid.services.football_data_client import FootballDataClient

logger = logging.getLogger(__name__)


def candidates(squad: list[SquadMember], nationality: str) -> list[SquadMember]:
    """Squad members whose nationality equals ``nationality`` ignoring case."""
    wanted = nationality.casefold()
    return [member for member in squad if member.nationality.casefold() == wanted]


class PlayerResolver:
    """Picks a random player of a given nationality from a team's squad."""

    def __init__(
        self,
        client: FootballDataClient,
        grid: Optional[Grid] = None,
        team_lookup: Literal["static", "search"] = "static",
        rng: Optional[random.Random] = None,
    ):
        """Initialize the resolver.

        Args:
            client: Upstream squad provider
            grid: Configured teams and countries
            team_lookup: "static" uses configured team ids, "search" queries
                the provider's team search by name
            rng: Random source for player selection
        """
        self.client = client
        self.grid = grid or Grid()
        self.team_lookup = team_lookup
        self.rng = rng or random.Random()

    async def _team_id(self, team: Team) -> int:
        if self.team_lookup == "search":
            return await self.client.search_team(team.name)
        return team.external_id

    async def find_player(self, team: Team | str, nationality: str) -> SquadMember:
        """Resolve a player or raise the reason there is none.

        Raises:
            InvalidSelection: team is not part of the grid
            ResolutionError: upstream failure, malformed payload or no match
        """
        if isinstance(team, str):
            team = self.grid.find_team(team)
        elif team not in self.grid.teams:
            team = self.grid.find_team(team.name)

        team_id = await self._team_id(team)
        squad = await self.client.get_squad(team_id)
        if not squad:
            raise NoMatch("No players found for this team.")

        matching = candidates(squad, nationality)
        if not matching:
            raise NoMatch(f"No players from {nationality} found in team {team.name}.")

        player = matching[self.rng.randrange(len(matching))]
        logger.info(
            f"Picked player for {team.name} / {nationality} "
            f"({len(matching)} of {len(squad)} squad members matched)"
        )
        return player

    async def resolve_player(self, team: Team | str, nationality: str) -> Optional[str]:
        """Return a player name, or None when no player can be resolved."""
        try:
            player = await self.find_player(team, nationality)
        except ResolutionError as e:
            name = team if isinstance(team, str) else team.name
            logger.warning(f"No player for {name} / {nationality} [{e.kind}]: {e}")
            return None
        return player.name
