from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from league.domain.buckets import BUCKETS, AssetBucket, classify_sector
from league.domain.tiers import DEFAULT_TIER, DiversificationTier, resolve_target

ONE_DECIMAL = Decimal("0.1")
HUNDRED = Decimal("100")

# (inclusive upper bound on worst deviation, modifier)
MODIFIER_BANDS: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal("5"), Decimal("1.00")),
    (Decimal("10"), Decimal("0.95")),
    (Decimal("15"), Decimal("0.90")),
    (Decimal("20"), Decimal("0.85")),
    (Decimal("25"), Decimal("0.80")),
)
MODIFIER_FLOOR = Decimal("0.75")
MODIFIER_STEPS = frozenset({modifier for _, modifier in MODIFIER_BANDS} | {MODIFIER_FLOOR})

MINOR_ADJUSTMENT_THRESHOLD = Decimal("0.90")


@dataclass(frozen=True)
class BucketAllocation:
    """Actual vs target share of a single bucket, in percentage points."""

    bucket: AssetBucket
    actual: Decimal
    target: Decimal
    deviation: Decimal

    @property
    def is_over_target(self) -> bool:
        return self.actual > self.target


@dataclass(frozen=True)
class DiversificationResult:
    """Outcome of comparing a portfolio's bucket mix to a target allocation.

    Attributes:
        tier: Preset the target came from, or None for a custom target
        allocations: One record per bucket, in bucket order
        worst_deviation: Largest per-bucket deviation
        worst_bucket: Bucket with the largest deviation (first wins on ties)
        modifier: Score multiplier derived from ``worst_deviation``
    """

    tier: DiversificationTier | None
    allocations: tuple[BucketAllocation, ...]
    worst_deviation: Decimal
    worst_bucket: AssetBucket
    modifier: Decimal

    @property
    def allocations_by_bucket(self) -> dict[AssetBucket, BucketAllocation]:
        return {a.bucket: a for a in self.allocations}

    @property
    def is_penalized(self) -> bool:
        return self.modifier < Decimal("1")

    @property
    def adjustment_label(self) -> str:
        return adjustment_label(self.modifier)

    def to_dict(self) -> dict[str, Any]:
        """Plain representation for logging and serialisation."""
        return {
            "tier": self.tier.value if self.tier else None,
            "allocations": [
                {
                    "bucket": a.bucket.value,
                    "actual": float(a.actual),
                    "target": float(a.target),
                    "deviation": float(a.deviation),
                }
                for a in self.allocations
            ],
            "worst_deviation": float(self.worst_deviation),
            "worst_bucket": self.worst_bucket.value,
            "modifier": float(self.modifier),
        }


def _read(holding: Any, names: tuple[str, ...]) -> Any:
    if isinstance(holding, Mapping):
        for name in names:
            if name in holding:
                return holding[name]
        return None
    for name in names:
        value = getattr(holding, name, None)
        if value is not None:
            return value
    return None


def _as_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _round(value: Decimal) -> Decimal:
    return value.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


def is_active(holding: Any) -> bool:
    """Holdings without an explicit flag count as active."""
    flag = _read(holding, ("is_active", "isActive"))
    return True if flag is None else bool(flag)


def group_by_bucket(holdings: Iterable[Any]) -> dict[AssetBucket, list[Any]]:
    """Group holdings by bucket, keeping input order within each bucket."""
    groups: dict[AssetBucket, list[Any]] = {bucket: [] for bucket in BUCKETS}
    for holding in holdings:
        groups[classify_sector(_read(holding, ("sector",)))].append(holding)
    return groups


def deviation_to_modifier(deviation: Decimal | float | int) -> Decimal:
    """
    Convert the worst bucket deviation into a score multiplier.

    0-5 -> 1.00, 5-10 -> 0.95, 10-15 -> 0.90, 15-20 -> 0.85,
    20-25 -> 0.80, above 25 -> 0.75. Upper bounds are inclusive.
    """
    value = _as_decimal(deviation)
    for upper_bound, modifier in MODIFIER_BANDS:
        if value <= upper_bound:
            return modifier
    return MODIFIER_FLOOR


def adjustment_label(modifier: Decimal | float) -> str:
    value = _as_decimal(modifier)
    if value >= 1:
        return "NO ADJUSTMENT"
    if value >= MINOR_ADJUSTMENT_THRESHOLD:
        return "MINOR ADJUSTMENT"
    return "SIGNIFICANT ADJUSTMENT"


def calculate_diversification(
    holdings: Iterable[Any],
    target: DiversificationTier | str | Mapping[AssetBucket | str, object] = DEFAULT_TIER,
) -> DiversificationResult:
    """
    Compare active holdings against a target allocation.

    Args:
        holdings: Objects or mappings exposing ``sector``, ``allocation`` and
            optionally ``is_active`` (``isActive`` is accepted for mappings).
        target: Tier name or a custom {bucket: percent} mapping.

    Returns:
        DiversificationResult with actuals normalised over active holdings.
        An empty or zero-allocation portfolio yields all-zero actuals.

    Raises:
        UnknownTierError: If ``target`` names no known tier.
        AllocationError: If a custom ``target`` is malformed.
    """
    tier, target_pct = resolve_target(target)

    active = [h for h in holdings if is_active(h)]
    raw: dict[AssetBucket, Decimal] = {bucket: Decimal("0") for bucket in BUCKETS}
    total = Decimal("0")
    for holding in active:
        allocation = _as_decimal(_read(holding, ("allocation",)))
        raw[classify_sector(_read(holding, ("sector",)))] += allocation
        total += allocation

    allocations = []
    for bucket in BUCKETS:
        actual = raw[bucket] / total * HUNDRED if total > 0 else Decimal("0")
        allocations.append(
            BucketAllocation(
                bucket=bucket,
                actual=_round(actual),
                target=target_pct[bucket],
                deviation=_round(abs(actual - target_pct[bucket])),
            )
        )

    worst = allocations[0]
    for allocation in allocations:
        if allocation.deviation > worst.deviation:
            worst = allocation

    return DiversificationResult(
        tier=tier,
        allocations=tuple(allocations),
        worst_deviation=worst.deviation,
        worst_bucket=worst.bucket,
        modifier=deviation_to_modifier(worst.deviation),
    )
