from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Literal, TypeAlias

Winner: TypeAlias = Literal["home", "away", "tie"]

# Win probability moves this many points per point of game-score lead.
WIN_PROBABILITY_SLOPE = Decimal("8")
MIN_WIN_PROBABILITY = 5
MAX_WIN_PROBABILITY = 95


@dataclass(frozen=True)
class MatchupOutcome:
    """Result of a head-to-head week between two portfolios."""

    home_score: Decimal
    away_score: Decimal
    home_win_probability: int
    winner: Winner

    @property
    def away_win_probability(self) -> int:
        return 100 - self.home_win_probability

    @property
    def margin(self) -> Decimal:
        return abs(self.home_score - self.away_score)


def game_score(weekly_growth_pct: Decimal | float, modifier: Decimal | float) -> Decimal:
    """Weekly growth percentage adjusted by the diversification modifier."""
    return Decimal(str(weekly_growth_pct)) * Decimal(str(modifier))


def win_probability(home_score: Decimal, away_score: Decimal) -> int:
    """Home side's chance of winning, clamped to 5-95%."""
    raw = Decimal("50") + (home_score - away_score) * WIN_PROBABILITY_SLOPE
    rounded = int(raw.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return max(MIN_WIN_PROBABILITY, min(MAX_WIN_PROBABILITY, rounded))


def decide_matchup(home_score: Decimal, away_score: Decimal) -> MatchupOutcome:
    winner: Winner
    if home_score > away_score:
        winner = "home"
    elif away_score > home_score:
        winner = "away"
    else:
        winner = "tie"
    return MatchupOutcome(
        home_score=home_score,
        away_score=away_score,
        home_win_probability=win_probability(home_score, away_score),
        winner=winner,
    )
