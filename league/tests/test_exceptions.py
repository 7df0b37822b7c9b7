"""
Tests for the league exception hierarchy.

Tests: league/exceptions.py
"""

import pytest

from league.domain import calculate_diversification, get_tier
from league.exceptions import AllocationError, LeagueError, ScoringError, UnknownTierError


@pytest.mark.unit
class TestExceptionHierarchy:
    @pytest.mark.parametrize("exc_class", [AllocationError, UnknownTierError, ScoringError])
    def test_subclasses_league_error(self, exc_class) -> None:
        assert issubclass(exc_class, LeagueError)
        with pytest.raises(LeagueError):
            raise exc_class("boom")

    def test_domain_errors_are_catchable_as_league_error(self) -> None:
        with pytest.raises(LeagueError):
            get_tier("reckless")
        with pytest.raises(LeagueError):
            calculate_diversification([], {"US Stocks": 50})
