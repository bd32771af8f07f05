"""Client for the football-data.org team and squad endpoints."""

import logging
from typing import Optional

import httpx

from squad_grid.errors import MalformedResponse, TeamNotFound, UpstreamUnavailable
from squad_grid.models.team import SquadMember

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.football-data.org/v4"


class FootballDataClient:
    """Thin async wrapper around the football-data.org REST API.

    Every call is attempted once. Failures are raised as
    ``UpstreamUnavailable`` or ``MalformedResponse`` so callers never see
    raw ``httpx`` errors.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            api_key: football-data.org token, sent as ``X-Auth-Token``
            base_url: API root, e.g. ``https://api.football-data.org/v4``
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"X-Auth-Token": self.api_key},
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def _get_json(self, path: str, params: Optional[dict] = None) -> dict:
        client = await self._get_client()
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"football-data request {path} failed with status {e.response.status_code}")
            raise UpstreamUnavailable(f"API request failed with status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"football-data request {path} failed: {e!r}")
            raise UpstreamUnavailable(f"API request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponse(f"Invalid JSON from {path}") from e
        if not isinstance(data, dict):
            raise MalformedResponse(f"Expected object from {path}, got {type(data).__name__}")
        return data

    async def search_team(self, name: str) -> int:
        """Return the provider's id for the first team matching ``name``."""
        data = await self._get_json("/teams", params={"name": name})
        teams = data.get("teams")
        if not teams:
            raise TeamNotFound("Team not found.")
        try:
            return int(teams[0]["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponse("Team search result has no id") from e

    async def get_squad(self, team_id: int) -> list[SquadMember]:
        """Fetch the current squad for a team id."""
        data = await self._get_json(f"/teams/{team_id}")
        squad = data.get("squad")
        if not isinstance(squad, list):
            raise MalformedResponse(f"Team {team_id} response has no squad")
        try:
            members = [SquadMember.from_api(entry) for entry in squad]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise MalformedResponse(f"Team {team_id} squad entry is malformed") from e
        logger.info(f"Fetched {len(members)} squad members for team {team_id}")
        return members
