from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from league.domain.buckets import AssetBucket, classify_sector
from league.domain.diversification import DiversificationResult, calculate_diversification
from league.managers import HoldingManager, PortfolioSnapshotManager


class PortfolioSnapshot(models.Model):
    """
    A member's holdings as synchronised on a given date.

    Snapshots are replaced, not edited: a brokerage sync or manual edit
    creates a newer snapshot and the latest one per member is scored.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="portfolio_snapshots",
    )
    league = models.ForeignKey(
        "League",
        on_delete=models.CASCADE,
        related_name="snapshots",
    )
    as_of = models.DateField()
    weekly_growth_pct = models.DecimalField(
        max_digits=8,
        decimal_places=4,
        default=Decimal("0"),
        help_text="Raw portfolio growth for the week (%)",
    )
    created_date = models.DateTimeField(auto_now_add=True)

    objects = PortfolioSnapshotManager()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["league", "user", "as_of"],
                name="unique_snapshot_per_member_per_day",
            ),
        ]
        ordering = ["-as_of", "-pk"]
        verbose_name = "Portfolio Snapshot"
        verbose_name_plural = "Portfolio Snapshots"

    def __str__(self) -> str:
        return f"{self.user} in {self.league} ({self.as_of})"

    def diversification(self) -> DiversificationResult:
        """Score this snapshot's holdings against the league tier."""
        # Inactive holdings are filtered by the calculation itself.
        return calculate_diversification(self.holdings.all(), self.league.tier)


class Holding(models.Model):
    """Single position within a portfolio snapshot."""

    snapshot = models.ForeignKey(
        PortfolioSnapshot, on_delete=models.CASCADE, related_name="holdings"
    )
    symbol = models.CharField(max_length=20)
    name = models.CharField(max_length=100, blank=True)
    sector = models.CharField(
        max_length=100, blank=True, help_text="Free-text sector or category label"
    )
    allocation = models.DecimalField(
        max_digits=7,
        decimal_places=4,
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("100"))],
        help_text="Share of the portfolio (%)",
    )
    is_active = models.BooleanField(default=True)

    objects = HoldingManager()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["snapshot", "symbol"],
                name="unique_symbol_per_snapshot",
            ),
        ]
        ordering = ["snapshot", "-allocation", "symbol"]

    def __str__(self) -> str:
        return f"{self.symbol} ({self.allocation}%)"

    @property
    def bucket(self) -> AssetBucket:
        return classify_sector(self.sector)
