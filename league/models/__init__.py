"""
League Django Models

Organized by domain:
- leagues.py: League and its diversification tier
- snapshots.py: Portfolio snapshots and their holdings
"""

from __future__ import annotations

from .leagues import League
from .snapshots import Holding, PortfolioSnapshot

# Django needs __all__ to register models properly
__all__ = [
    "Holding",
    "League",
    "PortfolioSnapshot",
]
