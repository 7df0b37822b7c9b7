"""Tests for custom league managers."""

import datetime
from decimal import Decimal

import pytest

from league.models import Holding, PortfolioSnapshot
from league.tests.factories import (
    HoldingFactory,
    LeagueFactory,
    PortfolioSnapshotFactory,
    UserFactory,
)


@pytest.mark.integration
@pytest.mark.models
@pytest.mark.django_db
class TestHoldingManager:
    def test_active(self) -> None:
        snapshot = PortfolioSnapshotFactory()
        HoldingFactory(snapshot=snapshot, symbol="ON", is_active=True)
        HoldingFactory(snapshot=snapshot, symbol="OFF", is_active=False)

        assert list(Holding.objects.active().values_list("symbol", flat=True)) == ["ON"]
        assert list(snapshot.holdings.inactive().values_list("symbol", flat=True)) == ["OFF"]


@pytest.mark.integration
@pytest.mark.models
@pytest.mark.django_db
class TestPortfolioSnapshotManager:
    def test_latest_for_returns_newest_per_member(self) -> None:
        league = LeagueFactory()
        alice, bob = UserFactory(username="alice"), UserFactory(username="bob")

        PortfolioSnapshotFactory(user=alice, league=league, as_of=datetime.date(2026, 10, 9))
        alice_latest = PortfolioSnapshotFactory(
            user=alice, league=league, as_of=datetime.date(2026, 10, 16)
        )
        bob_latest = PortfolioSnapshotFactory(
            user=bob, league=league, as_of=datetime.date(2026, 10, 2)
        )

        latest = PortfolioSnapshot.objects.latest_for(league)

        assert set(latest) == {alice_latest, bob_latest}

    def test_latest_for_excludes_other_leagues(self) -> None:
        league, other = LeagueFactory(), LeagueFactory()
        user = UserFactory()
        mine = PortfolioSnapshotFactory(user=user, league=league, as_of=datetime.date(2026, 10, 1))
        PortfolioSnapshotFactory(user=user, league=other, as_of=datetime.date(2026, 10, 16))

        assert list(PortfolioSnapshot.objects.latest_for(league)) == [mine]

    def test_latest_for_prefetches_holdings(self, django_assert_num_queries) -> None:
        league = LeagueFactory()
        for _ in range(3):
            snapshot = PortfolioSnapshotFactory(league=league)
            HoldingFactory(snapshot=snapshot, allocation=Decimal("50"))

        with django_assert_num_queries(2):
            snapshots = list(PortfolioSnapshot.objects.latest_for(league))
            for snapshot in snapshots:
                list(snapshot.holdings.all())
                snapshot.user.username
