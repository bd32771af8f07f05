"""The 3x3 grid of teams (rows) and countries (columns)."""

from dataclasses import dataclass

from squad_grid.errors import InvalidSelection
from squad_grid.models.team import Team

# Team ids may differ between API versions or plans.
DEFAULT_TEAMS = (
    Team(name="Manchester United", external_id=66),
    Team(name="Real Madrid", external_id=86),
    Team(name="Bayern Munich", external_id=5),
)

DEFAULT_COUNTRIES = ("England", "Spain", "Germany")


@dataclass(frozen=True)
class Grid:
    """Fixed set of teams and countries a round can be played on."""

    teams: tuple[Team, ...] = DEFAULT_TEAMS
    countries: tuple[str, ...] = DEFAULT_COUNTRIES

    def team_at(self, index: int) -> Team:
        if not 0 <= index < len(self.teams):
            raise InvalidSelection(f"No team at row {index}")
        return self.teams[index]

    def country_at(self, index: int) -> str:
        if not 0 <= index < len(self.countries):
            raise InvalidSelection(f"No country at column {index}")
        return self.countries[index]

    def find_team(self, name: str) -> Team:
        """Look up a configured team by name (case-insensitive)."""
        wanted = name.strip().casefold()
        for team in self.teams:
            if team.name.casefold() == wanted:
                return team
        raise InvalidSelection(f"Team not found: {name}")

    def to_dict(self) -> dict:
        return {
            "teams": [{"name": t.name, "external_id": t.external_id} for t in self.teams],
            "countries": list(self.countries),
        }
