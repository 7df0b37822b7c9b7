"""Head-to-head matchup scoring."""

from __future__ import annotations

import structlog

from league.domain.matchup import MatchupOutcome, decide_matchup
from league.exceptions import ScoringError
from league.models import PortfolioSnapshot
from league.services.diversification import DiversificationService

logger = structlog.get_logger(__name__)


class MatchupService:
    """Decides weekly matchups from diversification-adjusted game scores."""

    def __init__(self, diversification: DiversificationService | None = None):
        self.diversification = diversification or DiversificationService()

    def score_matchup(
        self, home: PortfolioSnapshot, away: PortfolioSnapshot
    ) -> MatchupOutcome:
        """
        Score two snapshots against each other.

        Raises:
            ScoringError: If the snapshots belong to different leagues or to
                the same member.
        """
        if home.league_id != away.league_id:
            raise ScoringError(
                f"Cannot score matchup across leagues ({home.league_id} vs {away.league_id})"
            )
        if home.user_id == away.user_id:
            raise ScoringError("A member cannot be matched against themselves")

        home_score = self.diversification.score_snapshot(home)
        away_score = self.diversification.score_snapshot(away)
        outcome = decide_matchup(home_score.game_score, away_score.game_score)

        logger.info(
            "matchup_scored",
            league_id=home.league_id,
            home_snapshot=home.pk,
            away_snapshot=away.pk,
            home_score=float(outcome.home_score),
            away_score=float(outcome.away_score),
            winner=outcome.winner,
        )
        return outcome
