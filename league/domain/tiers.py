from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from enum import StrEnum
from typing import TypeAlias

from league.domain.buckets import BUCKETS, AssetBucket
from league.exceptions import AllocationError, UnknownTierError

TargetAllocation: TypeAlias = dict[AssetBucket, Decimal]

TOTAL_ALLOCATION_PCT = Decimal("100")
ALLOCATION_TOLERANCE = Decimal("0.001")


class DiversificationTier(StrEnum):
    """Named target-allocation preset a league scores against."""

    CAUTIOUS = "cautious"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"

    @property
    def label(self) -> str:
        return TIER_LABELS[self]


DEFAULT_TIER = DiversificationTier.MODERATE

TIER_LABELS: dict[DiversificationTier, str] = {
    DiversificationTier.CAUTIOUS: "Cautious",
    DiversificationTier.MODERATE: "Moderate",
    DiversificationTier.AGGRESSIVE: "Aggressive",
}

TIER_ALLOCATIONS: dict[DiversificationTier, TargetAllocation] = {
    DiversificationTier.CAUTIOUS: {
        AssetBucket.US_STOCKS: Decimal("30"),
        AssetBucket.INTL_STOCKS: Decimal("15"),
        AssetBucket.US_BONDS: Decimal("40"),
        AssetBucket.INTL_BONDS: Decimal("15"),
    },
    DiversificationTier.MODERATE: {
        AssetBucket.US_STOCKS: Decimal("45"),
        AssetBucket.INTL_STOCKS: Decimal("25"),
        AssetBucket.US_BONDS: Decimal("20"),
        AssetBucket.INTL_BONDS: Decimal("10"),
    },
    DiversificationTier.AGGRESSIVE: {
        AssetBucket.US_STOCKS: Decimal("60"),
        AssetBucket.INTL_STOCKS: Decimal("25"),
        AssetBucket.US_BONDS: Decimal("10"),
        AssetBucket.INTL_BONDS: Decimal("5"),
    },
}


def get_tier(tier: DiversificationTier | str) -> DiversificationTier:
    """Coerce a tier name (case-insensitive) to a ``DiversificationTier``."""
    if isinstance(tier, DiversificationTier):
        return tier
    try:
        return DiversificationTier(str(tier).strip().lower())
    except ValueError:
        raise UnknownTierError(
            f"Unknown diversification tier {tier!r}; "
            f"expected one of {', '.join(t.value for t in DiversificationTier)}"
        ) from None


def validate_allocation(target: Mapping[AssetBucket | str, object]) -> TargetAllocation:
    """
    Validate a custom target allocation and return it keyed by bucket.

    Args:
        target: Mapping of bucket (or bucket name) to target percentage.

    Raises:
        AllocationError: If a bucket is missing or unknown, a percentage is
            negative, or the percentages do not sum to 100%.
    """
    result: TargetAllocation = {}
    for key, value in target.items():
        try:
            bucket = AssetBucket(key)
        except ValueError:
            raise AllocationError(f"Unknown asset bucket {key!r} in target allocation") from None
        pct = Decimal(str(value))
        if pct < 0:
            raise AllocationError(f"Target for {bucket} is negative ({pct}%)")
        result[bucket] = pct

    missing = [bucket.value for bucket in BUCKETS if bucket not in result]
    if missing:
        raise AllocationError(f"Target allocation is missing buckets: {', '.join(missing)}")

    total = sum(result.values(), Decimal("0"))
    if abs(total - TOTAL_ALLOCATION_PCT) > ALLOCATION_TOLERANCE:
        raise AllocationError(
            f"Target allocation sums to {total}%, expected exactly {TOTAL_ALLOCATION_PCT}%"
        )

    return {bucket: result[bucket] for bucket in BUCKETS}


def resolve_target(
    target: DiversificationTier | str | Mapping[AssetBucket | str, object],
) -> tuple[DiversificationTier | None, TargetAllocation]:
    """Return ``(tier, allocation)``; tier is None for a custom mapping."""
    if isinstance(target, Mapping):
        return None, validate_allocation(target)
    tier = get_tier(target)
    return tier, dict(TIER_ALLOCATIONS[tier])
