class LeagueError(Exception):
    """Base exception for all league related errors."""

    pass


class AllocationError(LeagueError):
    """Raised when a target allocation is invalid (e.g., sum != 100%)."""

    pass


class UnknownTierError(LeagueError):
    """Raised when a diversification tier name is not recognised."""

    pass


class ScoringError(LeagueError):
    """Raised when a matchup cannot be scored (e.g., snapshots from different leagues)."""

    pass
