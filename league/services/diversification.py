"""Diversification scoring for persisted portfolio snapshots."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TypeAlias

import pandas as pd
import structlog

from league.domain.buckets import BUCKETS, AssetBucket, classify_sector, is_known_sector
from league.domain.diversification import DiversificationResult, calculate_diversification
from league.domain.matchup import game_score
from league.domain.tiers import DiversificationTier
from league.models import League, PortfolioSnapshot

logger = structlog.get_logger(__name__)

Target: TypeAlias = DiversificationTier | str | Mapping[AssetBucket | str, object]

REPORT_COLUMNS = [
    "member",
    "as_of",
    *[f"{bucket.value} %" for bucket in BUCKETS],
    "worst_bucket",
    "worst_deviation",
    "modifier",
    "weekly_growth_pct",
    "game_score",
]


@dataclass(frozen=True)
class SnapshotScore:
    """Diversification result and adjusted game score for one snapshot."""

    snapshot: PortfolioSnapshot
    result: DiversificationResult
    game_score: Decimal

    @property
    def modifier(self) -> Decimal:
        return self.result.modifier


class DiversificationService:
    """
    Applies the diversification calculation to stored data.

    The calculation itself lives in ``league.domain``; this service loads
    holdings, picks the league's tier and reports on the outcome.
    """

    def score_holdings(self, holdings: Iterable[Any], target: Target) -> DiversificationResult:
        holdings = list(holdings)
        self._log_unclassified(holdings)

        result = calculate_diversification(holdings, target)
        logger.info(
            "diversification_scored",
            tier=result.tier.value if result.tier else "custom",
            holdings=len(holdings),
            worst_bucket=result.worst_bucket.value,
            worst_deviation=float(result.worst_deviation),
            modifier=float(result.modifier),
        )
        return result

    def score_snapshot(
        self, snapshot: PortfolioSnapshot, tier: DiversificationTier | str | None = None
    ) -> SnapshotScore:
        """
        Score a snapshot against its league tier (or ``tier`` when given).

        Returns:
            SnapshotScore with the weekly growth adjusted by the modifier.
        """
        result = self.score_holdings(snapshot.holdings.all(), tier or snapshot.league.tier)
        return SnapshotScore(
            snapshot=snapshot,
            result=result,
            game_score=game_score(snapshot.weekly_growth_pct, result.modifier),
        )

    def league_report(
        self, league: League, tier: DiversificationTier | str | None = None
    ) -> pd.DataFrame:
        """
        Build a per-member diversification table for a league.

        Uses the newest snapshot of each member. Rows are sorted by game
        score, best first.

        Returns:
            DataFrame with ``REPORT_COLUMNS``; empty when no member has a snapshot.
        """
        rows = []
        for snapshot in PortfolioSnapshot.objects.latest_for(league):
            score = self.score_snapshot(snapshot, tier)
            by_bucket = score.result.allocations_by_bucket
            rows.append(
                {
                    "member": snapshot.user.get_username(),
                    "as_of": snapshot.as_of,
                    **{f"{b.value} %": float(by_bucket[b].actual) for b in BUCKETS},
                    "worst_bucket": score.result.worst_bucket.value,
                    "worst_deviation": float(score.result.worst_deviation),
                    "modifier": float(score.modifier),
                    "weekly_growth_pct": float(snapshot.weekly_growth_pct),
                    "game_score": float(score.game_score),
                }
            )

        if not rows:
            return pd.DataFrame(columns=REPORT_COLUMNS)

        report = pd.DataFrame(rows, columns=REPORT_COLUMNS)
        return report.sort_values(
            ["game_score", "member"], ascending=[False, True]
        ).reset_index(drop=True)

    def _log_unclassified(self, holdings: list[Any]) -> None:
        # Diagnostic only: the bucket returned by classify_sector is unchanged.
        for holding in holdings:
            sector = getattr(holding, "sector", None)
            if sector is None and isinstance(holding, Mapping):
                sector = holding.get("sector")
            if not is_known_sector(sector):
                logger.debug(
                    "sector_unclassified",
                    sector=sector,
                    symbol=getattr(holding, "symbol", None),
                    bucket=classify_sector(sector).value,
                )
