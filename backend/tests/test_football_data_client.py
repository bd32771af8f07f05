"""Tests for the football-data.org client."""

import httpx
import pytest

from squad_grid.errors import MalformedResponse, TeamNotFound, UpstreamUnavailable
from squad_grid.services.football_data_client import FootballDataClient

pytestmark = pytest.mark.anyio


def make_client(handler) -> FootballDataClient:
    return FootballDataClient(
        api_key="secret-token",
        base_url="https://api.example.test/v4",
        transport=httpx.MockTransport(handler),
    )


async def test_get_squad_sends_token_and_parses_members():
    """Squad entries become SquadMember objects; token is sent as a header."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["token"] = request.headers.get("X-Auth-Token")
        return httpx.Response(
            200,
            json={
                "id": 86,
                "name": "Real Madrid CF",
                "squad": [
                    {"id": 1, "name": "Sergio", "position": "Defence", "dateOfBirth": "1986-03-30", "nationality": "Spain"},
                    {"id": 2, "name": "Toni", "position": "Midfield", "nationality": "Germany"},
                ],
            },
        )

    client = make_client(handler)
    squad = await client.get_squad(86)
    await client.close()

    assert seen["url"] == "https://api.example.test/v4/teams/86"
    assert seen["token"] == "secret-token"
    assert [m.name for m in squad] == ["Sergio", "Toni"]
    assert squad[0].nationality == "Spain"
    assert squad[0].date_of_birth == "1986-03-30"
    assert squad[1].date_of_birth is None


async def test_get_squad_missing_nationality_is_empty_string():
    def handler(request):
        return httpx.Response(200, json={"squad": [{"name": "Nobody", "nationality": None}]})

    squad = await make_client(handler).get_squad(5)
    assert squad[0].nationality == ""


async def test_get_squad_non_success_status():
    def handler(request):
        return httpx.Response(403, json={"message": "restricted"})

    with pytest.raises(UpstreamUnavailable, match="403"):
        await make_client(handler).get_squad(5)


async def test_get_squad_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamUnavailable):
        await make_client(handler).get_squad(5)


async def test_get_squad_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(UpstreamUnavailable):
        await make_client(handler).get_squad(5)


async def test_get_squad_missing_squad_field():
    def handler(request):
        return httpx.Response(200, json={"id": 5, "name": "FC Bayern München"})

    with pytest.raises(MalformedResponse):
        await make_client(handler).get_squad(5)


async def test_get_squad_entry_without_name():
    def handler(request):
        return httpx.Response(200, json={"squad": [{"nationality": "Germany"}]})

    with pytest.raises(MalformedResponse):
        await make_client(handler).get_squad(5)


async def test_get_squad_invalid_json():
    def handler(request):
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(MalformedResponse):
        await make_client(handler).get_squad(5)


async def test_search_team_returns_first_id():
    seen = {}

    def handler(request):
        seen["name"] = request.url.params.get("name")
        return httpx.Response(200, json={"teams": [{"id": 86, "name": "Real Madrid CF"}, {"id": 9}]})

    team_id = await make_client(handler).search_team("Real Madrid")
    assert team_id == 86
    assert seen["name"] == "Real Madrid"


async def test_search_team_no_results():
    def handler(request):
        return httpx.Response(200, json={"teams": []})

    with pytest.raises(TeamNotFound):
        await make_client(handler).search_team("Nowhere FC")


async def test_each_call_is_attempted_once():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500)

    with pytest.raises(UpstreamUnavailable):
        await make_client(handler).get_squad(66)
    assert len(calls) == 1


@pytest.mark.parametrize("nationality", [7, {"x": 1}, ["Spain"]])
async def test_get_squad_non_string_nationality(nationality):
    def handler(request):
        return httpx.Response(200, json={"squad": [{"name": "A", "nationality": nationality}]})

    with pytest.raises(MalformedResponse):
        await make_client(handler).get_squad(86)


@pytest.mark.parametrize("name", [10, None, "   "])
async def test_get_squad_unusable_name(name):
    def handler(request):
        return httpx.Response(200, json={"squad": [{"name": name, "nationality": "Spain"}]})

    with pytest.raises(MalformedResponse):
        await make_client(handler).get_squad(86)
