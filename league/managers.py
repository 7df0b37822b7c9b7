from __future__ import annotations

from typing import TYPE_CHECKING

from django.db import models
from django.db.models import OuterRef, Subquery

if TYPE_CHECKING:
    from league.models import League


class HoldingQuerySet(models.QuerySet):
    def active(self) -> HoldingQuerySet:
        return self.filter(is_active=True)

    def inactive(self) -> HoldingQuerySet:
        return self.filter(is_active=False)


class HoldingManager(models.Manager):
    def get_queryset(self) -> HoldingQuerySet:
        return HoldingQuerySet(self.model, using=self._db)

    def active(self) -> HoldingQuerySet:
        return self.get_queryset().active()

    def inactive(self) -> HoldingQuerySet:
        return self.get_queryset().inactive()


class PortfolioSnapshotQuerySet(models.QuerySet):
    def for_league(self, league: League) -> PortfolioSnapshotQuerySet:
        return self.filter(league=league)

    def with_details(self) -> PortfolioSnapshotQuerySet:
        return self.select_related("user", "league").prefetch_related("holdings")

    def latest_for(self, league: League) -> PortfolioSnapshotQuerySet:
        """Newest snapshot of each member of ``league``."""
        newest = (
            self.model.objects.filter(league=league, user=OuterRef("user"))
            .order_by("-as_of", "-pk")
            .values("pk")[:1]
        )
        return self.for_league(league).filter(pk=Subquery(newest)).with_details()


class PortfolioSnapshotManager(models.Manager):
    def get_queryset(self) -> PortfolioSnapshotQuerySet:
        return PortfolioSnapshotQuerySet(self.model, using=self._db)

    def latest_for(self, league: League) -> PortfolioSnapshotQuerySet:
        return self.get_queryset().latest_for(league)
