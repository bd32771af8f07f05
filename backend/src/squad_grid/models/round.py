"""Round value object for a single play cycle."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from squad_grid.models.team import Team

MAX_ATTEMPTS = 3


class RoundStatus(str, Enum):
    """Lifecycle of a round."""

    IDLE = "idle"  # No cell selected
    RESOLVING = "resolving"  # Player lookup in flight
    READY = "ready"  # Player resolved, guessing allowed
    EXHAUSTED = "exhausted"  # Lookup found nobody
    REVEALED = "revealed"  # Correct guess or attempts used up


@dataclass(frozen=True)
class Round:
    """State of the live round.

    Instances are never mutated; transitions build a new Round with
    ``dataclasses.replace``. ``round_id`` is the generation token used to
    discard lookups that finish after a newer selection.
    """

    round_id: int = 0
    team: Optional[Team] = None
    country: Optional[str] = None
    resolved_player: Optional[str] = None
    guess_count: int = 0
    revealed: bool = False
    status: RoundStatus = RoundStatus.IDLE
    message: str = ""

    @property
    def attempts_left(self) -> int:
        return MAX_ATTEMPTS - self.guess_count

    @property
    def can_guess(self) -> bool:
        return self.status == RoundStatus.READY

    def view(self) -> dict:
        """Public snapshot; the player name is only included once revealed."""
        return {
            "round_id": self.round_id,
            "status": self.status.value,
            "team": self.team.name if self.team else None,
            "country": self.country,
            "guess_count": self.guess_count,
            "max_attempts": MAX_ATTEMPTS,
            "revealed": self.revealed,
            "can_guess": self.can_guess,
            "message": self.message,
            "player": self.resolved_player if self.revealed else None,
        }
