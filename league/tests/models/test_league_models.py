"""
Tests for league models.

Tests: league/models/leagues.py, league/models/snapshots.py
"""

import datetime
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import IntegrityError

import pytest

from league.domain import AssetBucket, DiversificationTier
from league.models import League
from league.tests.factories import HoldingFactory, LeagueFactory, PortfolioSnapshotFactory


@pytest.mark.models
@pytest.mark.integration
@pytest.mark.django_db
class TestLeague:
    def test_default_tier_from_settings(self, settings) -> None:
        settings.LEAGUE_DEFAULT_TIER = "cautious"
        league = League.objects.create(name="Cautious League")
        assert league.tier is DiversificationTier.CAUTIOUS

    def test_default_tier_is_moderate(self) -> None:
        league = League.objects.create(name="Default League")
        assert league.diversification_tier == "moderate"

    def test_target_allocation(self) -> None:
        league = LeagueFactory(diversification_tier="aggressive")
        target = league.target_allocation()
        assert target[AssetBucket.US_STOCKS] == Decimal("60")
        assert sum(target.values()) == Decimal("100")

    def test_target_allocation_is_a_copy(self) -> None:
        league = LeagueFactory()
        league.target_allocation()[AssetBucket.US_STOCKS] = Decimal("0")
        assert league.target_allocation()[AssetBucket.US_STOCKS] == Decimal("45")

    def test_str(self) -> None:
        assert str(LeagueFactory(name="Bulls")) == "Bulls"


@pytest.mark.models
@pytest.mark.integration
@pytest.mark.django_db
class TestPortfolioSnapshot:
    def test_one_snapshot_per_member_per_day(self) -> None:
        snapshot = PortfolioSnapshotFactory(as_of=datetime.date(2026, 10, 16))
        with pytest.raises(IntegrityError):
            PortfolioSnapshotFactory(
                user=snapshot.user, league=snapshot.league, as_of=snapshot.as_of
            )

    def test_diversification_uses_league_tier(self) -> None:
        snapshot = PortfolioSnapshotFactory(league=LeagueFactory(diversification_tier="cautious"))
        HoldingFactory(snapshot=snapshot, sector="Bonds", allocation=Decimal("40"))
        HoldingFactory(snapshot=snapshot, sector="Tech", allocation=Decimal("30"))
        HoldingFactory(snapshot=snapshot, sector="International", allocation=Decimal("15"))
        HoldingFactory(snapshot=snapshot, sector="Intl Bonds", allocation=Decimal("15"))

        result = snapshot.diversification()

        assert result.tier is DiversificationTier.CAUTIOUS
        assert result.modifier == Decimal("1.00")

    def test_diversification_ignores_inactive_holdings(self) -> None:
        snapshot = PortfolioSnapshotFactory()
        HoldingFactory(snapshot=snapshot, sector="Tech", allocation=Decimal("100"))
        HoldingFactory(snapshot=snapshot, sector="Bonds", allocation=Decimal("50"), is_active=False)

        result = snapshot.diversification()

        assert result.allocations_by_bucket[AssetBucket.US_BONDS].actual == 0
        assert result.modifier == Decimal("0.75")


@pytest.mark.models
@pytest.mark.integration
@pytest.mark.django_db
class TestHolding:
    def test_bucket(self) -> None:
        assert HoldingFactory(sector="Intl Bond").bucket is AssetBucket.INTL_BONDS
        assert HoldingFactory(sector="bond fund").bucket is AssetBucket.US_STOCKS

    def test_allocation_above_100_rejected(self) -> None:
        holding = HoldingFactory.build(
            snapshot=PortfolioSnapshotFactory(), allocation=Decimal("120")
        )
        with pytest.raises(ValidationError) as excinfo:
            holding.full_clean()
        assert "allocation" in excinfo.value.message_dict

    def test_negative_allocation_rejected(self) -> None:
        holding = HoldingFactory.build(
            snapshot=PortfolioSnapshotFactory(), allocation=Decimal("-1")
        )
        with pytest.raises(ValidationError):
            holding.full_clean()

    def test_symbol_unique_within_snapshot(self) -> None:
        holding = HoldingFactory(symbol="VTI")
        with pytest.raises(IntegrityError):
            HoldingFactory(snapshot=holding.snapshot, symbol="VTI")

    def test_str(self) -> None:
        assert str(HoldingFactory(symbol="VTI", allocation=Decimal("45"))) == "VTI (45%)"
