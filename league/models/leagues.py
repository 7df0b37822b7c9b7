from __future__ import annotations

from django.conf import settings
from django.db import models

from league.domain.tiers import (
    DEFAULT_TIER,
    TIER_ALLOCATIONS,
    DiversificationTier,
    TargetAllocation,
    get_tier,
)


def default_tier() -> str:
    """Tier assigned to new leagues (``LEAGUE_DEFAULT_TIER`` setting)."""
    return get_tier(getattr(settings, "LEAGUE_DEFAULT_TIER", DEFAULT_TIER)).value


class League(models.Model):
    """A group of members competing in weekly head-to-head matchups."""

    name = models.CharField(max_length=100, unique=True)
    diversification_tier = models.CharField(
        max_length=20,
        choices=[(tier.value, tier.label) for tier in DiversificationTier],
        default=default_tier,
        help_text="Target allocation preset used for the diversification modifier",
    )
    created_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    @property
    def tier(self) -> DiversificationTier:
        return get_tier(self.diversification_tier)

    def target_allocation(self) -> TargetAllocation:
        """
        Target split for this league's tier.

        Returns:
            Dict of {AssetBucket: target_percent}, in bucket order
        """
        return dict(TIER_ALLOCATIONS[self.tier])
