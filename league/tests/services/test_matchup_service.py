"""
Tests for head-to-head matchup scoring.

Tests: league/services/matchups.py
"""

from decimal import Decimal

import pytest

from league.exceptions import ScoringError
from league.services import MatchupService
from league.tests.conftest import BALANCED_HOLDINGS
from league.tests.factories import LeagueFactory


@pytest.mark.services
@pytest.mark.integration
@pytest.mark.django_db
class TestMatchupService:
    def test_diversification_can_flip_the_result(
        self, league, make_user, make_snapshot
    ) -> None:
        home = make_snapshot(make_user("home"), league, BALANCED_HOLDINGS, growth="4.2")
        away = make_snapshot(make_user("away"), league, [("NVDA", "Tech", "100")], growth="5.0")

        outcome = MatchupService().score_matchup(home, away)

        assert outcome.home_score == Decimal("4.2")
        assert outcome.away_score == Decimal("3.75")
        assert outcome.winner == "home"
        assert outcome.home_win_probability == 54

    def test_tie(self, league, make_user, make_snapshot) -> None:
        home = make_snapshot(make_user("home"), league, BALANCED_HOLDINGS, growth="1.0")
        away = make_snapshot(make_user("away"), league, BALANCED_HOLDINGS, growth="1.0")

        assert MatchupService().score_matchup(home, away).winner == "tie"

    def test_rejects_cross_league_matchups(self, league, make_user, make_snapshot) -> None:
        home = make_snapshot(make_user("home"), league, BALANCED_HOLDINGS)
        away = make_snapshot(make_user("away"), LeagueFactory(), BALANCED_HOLDINGS)

        with pytest.raises(ScoringError) as excinfo:
            MatchupService().score_matchup(home, away)
        assert "across leagues" in str(excinfo.value)

    def test_rejects_self_matchups(self, league, test_user, make_snapshot) -> None:
        snapshot = make_snapshot(test_user, league, BALANCED_HOLDINGS)

        with pytest.raises(ScoringError):
            MatchupService().score_matchup(snapshot, snapshot)
