from __future__ import annotations

from .buckets import BUCKETS, AssetBucket, classify_sector, is_known_sector
from .diversification import (
    MODIFIER_STEPS,
    BucketAllocation,
    DiversificationResult,
    adjustment_label,
    calculate_diversification,
    deviation_to_modifier,
    group_by_bucket,
)
from .matchup import MatchupOutcome, decide_matchup, game_score, win_probability
from .tiers import (
    DEFAULT_TIER,
    TIER_ALLOCATIONS,
    DiversificationTier,
    get_tier,
    validate_allocation,
)

__all__ = [
    "BUCKETS",
    "DEFAULT_TIER",
    "MODIFIER_STEPS",
    "TIER_ALLOCATIONS",
    "AssetBucket",
    "BucketAllocation",
    "DiversificationResult",
    "DiversificationTier",
    "MatchupOutcome",
    "adjustment_label",
    "calculate_diversification",
    "classify_sector",
    "decide_matchup",
    "deviation_to_modifier",
    "game_score",
    "get_tier",
    "group_by_bucket",
    "is_known_sector",
    "validate_allocation",
    "win_probability",
]
