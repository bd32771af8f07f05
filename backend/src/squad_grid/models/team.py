"""Team and squad member models."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Team:
    """A team in the grid."""

    name: str
    external_id: int  # football-data.org team id


@dataclass(frozen=True)
class SquadMember:
    """A player listed in a team's squad."""

    name: str
    nationality: str
    id: Optional[int] = None
    position: Optional[str] = None
    date_of_birth: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict) -> "SquadMember":
        """Build from a football-data.org squad entry.

        Raises:
            KeyError: entry has no name
            TypeError: name or nationality is not a string
            ValueError: name is blank
        """
        name = data["name"]
        nationality = data.get("nationality")
        if not isinstance(name, str):
            raise TypeError(f"Squad member name must be a string, got {type(name).__name__}")
        if not name.strip():
            raise ValueError("Squad member name is blank")
        if nationality is not None and not isinstance(nationality, str):
            raise TypeError(f"Squad member nationality must be a string, got {type(nationality).__name__}")
        return cls(
            name=name,
            nationality=nationality or "",
            id=data.get("id"),
            position=data.get("position"),
            date_of_birth=data.get("dateOfBirth"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "nationality": self.nationality,
            "position": self.position,
            "date_of_birth": self.date_of_birth,
        }
