"""Error types raised while resolving a player for a grid cell."""


class SquadGridError(Exception):
    """Base class for all squad grid errors."""

    status_code: int = 500


class InvalidSelection(SquadGridError, LookupError):
    """Team or country is outside the configured grid."""

    status_code = 404


class ResolutionError(SquadGridError):
    """A resolution attempt produced no player.

    Subclasses are reported to the player as the same "no player found"
    outcome, but keep their own kind for logs and HTTP status codes.
    """

    kind = "resolution_error"


class UpstreamUnavailable(ResolutionError):
    """Network failure, timeout or non-success response from the provider."""

    kind = "upstream_unavailable"
    status_code = 500


class MalformedResponse(ResolutionError):
    """Provider responded but the payload is missing expected fields."""

    kind = "malformed_response"
    status_code = 404


class NoMatch(ResolutionError):
    """Provider responded but no squad member matches the nationality."""

    kind = "no_match"
    status_code = 404


class TeamNotFound(NoMatch):
    """Team search returned no teams."""

    kind = "team_not_found"
