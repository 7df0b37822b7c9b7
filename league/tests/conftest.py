"""
Root-level pytest fixtures for the league test suite.

Fixture Hierarchy:
- league: Moderate-tier league
- test_user: Standard test user
- make_snapshot: Builds a snapshot with holdings for a member of a league
"""

import datetime
from decimal import Decimal
from typing import Any

from django.contrib.auth import get_user_model

import pytest

from league.models import Holding, League, PortfolioSnapshot

User = get_user_model()

# Moderate tier split (45/25/20/10) expressed as holdings
BALANCED_HOLDINGS = [
    ("VTI", "US Stocks", "45"),
    ("VXUS", "International", "25"),
    ("BND", "Bonds", "20"),
    ("BNDX", "Intl Bond", "10"),
]


@pytest.fixture
def moderate_holdings() -> list[dict[str, Any]]:
    """Plain holdings matching the moderate tier exactly."""
    return [
        {"symbol": symbol, "sector": sector, "allocation": Decimal(pct), "is_active": True}
        for symbol, sector, pct in BALANCED_HOLDINGS
    ]


@pytest.fixture
def league(db) -> League:
    return League.objects.create(name="Alpha League", diversification_tier="moderate")


@pytest.fixture
def test_user(db):
    """Standard test user - reusable across all tests."""
    return User.objects.create_user(username="testuser", password="password")


@pytest.fixture
def make_user(db):
    def _create_user(username: str):
        return User.objects.create_user(username=username, password="password")

    return _create_user


@pytest.fixture
def make_snapshot(db):
    """
    Factory fixture for snapshots.

    Holdings are (symbol, sector, allocation) or (symbol, sector, allocation, is_active).
    """

    def _make(
        user: Any,
        league: League,
        holdings: list[tuple],
        growth: str = "0",
        as_of: datetime.date | None = None,
    ) -> PortfolioSnapshot:
        snapshot = PortfolioSnapshot.objects.create(
            user=user,
            league=league,
            as_of=as_of or datetime.date(2026, 10, 16),
            weekly_growth_pct=Decimal(growth),
        )
        for row in holdings:
            symbol, sector, allocation = row[:3]
            is_active = row[3] if len(row) > 3 else True
            Holding.objects.create(
                snapshot=snapshot,
                symbol=symbol,
                sector=sector,
                allocation=Decimal(allocation),
                is_active=is_active,
            )
        return snapshot

    return _make
