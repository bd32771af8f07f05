"""State machine for a single round of the guessing game."""

import logging
from dataclasses import replace
from typing import Optional

from squad_grid.models.grid import Grid
from squad_grid.models.round import MAX_ATTEMPTS, Round, RoundStatus
from squad_grid.services.player_resolver import PlayerResolver

logger = logging.getLogger(__name__)


def normalize_guess(text: str) -> str:
    return text.strip().casefold()


class RoundStateMachine:
    """Owns the one live Round and applies transitions to it.

    ``select_cell`` is the only suspending transition. Each selection gets a
    new ``round_id``; a lookup that completes after another selection (or a
    reset) has started is dropped.
    """

    def __init__(self, resolver: PlayerResolver, grid: Optional[Grid] = None):
        self.resolver = resolver
        self.grid = grid or resolver.grid
        self._last_round_id = 0
        self._round = Round()

    @property
    def round(self) -> Round:
        return self._round

    def view(self) -> dict:
        return self._round.view()

    def _next_round_id(self) -> int:
        self._last_round_id += 1
        return self._last_round_id

    async def select_cell(self, team_index: int, country_index: int) -> Round:
        """Start a new round for a grid cell and resolve its player.

        Raises:
            InvalidSelection: index outside the grid
        """
        team = self.grid.team_at(team_index)
        country = self.grid.country_at(country_index)

        round_id = self._next_round_id()
        self._round = Round(
            round_id=round_id,
            team=team,
            country=country,
            status=RoundStatus.RESOLVING,
            message="Fetching a random player...",
        )

        try:
            player = await self.resolver.resolve_player(team, country)
        except Exception as e:
            # The round must not stay in RESOLVING
            logger.error(f"Player lookup for round {round_id} failed unexpectedly: {e!r}")
            player = None

        if self._round.round_id != round_id:
            logger.info(f"Discarding stale result for round {round_id} (current: {self._round.round_id})")
            return self._round

        if player is None:
            self._round = replace(
                self._round,
                status=RoundStatus.EXHAUSTED,
                message=f"No players found for {team.name} / {country}, or data unavailable.",
            )
        else:
            self._round = replace(
                self._round,
                resolved_player=player,
                guess_count=0,
                status=RoundStatus.READY,
                message=f"A player from {team.name} who is from {country} has been chosen. Good luck!",
            )
        logger.info(f"Round {round_id} for {team.name} / {country} is {self._round.status.value}")
        return self._round

    def submit_guess(self, text: str) -> Round:
        """Check a guess against the resolved player.

        No-op unless the round is ready for guesses.
        """
        current = self._round
        if not current.can_guess or current.resolved_player is None:
            return current

        guess_count = current.guess_count + 1
        if normalize_guess(text) == normalize_guess(current.resolved_player):
            self._round = replace(
                current,
                guess_count=guess_count,
                revealed=True,
                status=RoundStatus.REVEALED,
                message="Congratulations! You guessed correctly!",
            )
        elif guess_count >= MAX_ATTEMPTS:
            self._round = replace(
                current,
                guess_count=guess_count,
                revealed=True,
                status=RoundStatus.REVEALED,
                message=f"Sorry, you've used all attempts. The player was: {current.resolved_player}",
            )
        else:
            left = MAX_ATTEMPTS - guess_count
            self._round = replace(
                current,
                guess_count=guess_count,
                message=(
                    f"Incorrect guess. Try again! "
                    f"(Attempt {guess_count}/{MAX_ATTEMPTS}, {left} left)"
                ),
            )
        return self._round

    def reset(self) -> Round:
        """Clear the round and return to idle."""
        self._round = Round(round_id=self._next_round_id())
        return self._round
