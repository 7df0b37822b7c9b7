"""
League Test Suite Organization

Mirrors the production layout:

### Domain (league/domain/ -> league/tests/domain/)
- test_buckets.py: Sector classification
- test_tiers.py: Tier presets and custom target validation
- test_diversification.py: Diversification result and modifier bands
- test_matchup.py: Game score, win probability, matchup winner

### Models (league/models/ -> league/tests/models/)
- test_league_models.py: League, PortfolioSnapshot, Holding
- test_managers.py: Custom querysets

### Services (league/services/ -> league/tests/services/)
- test_diversification_service.py: Snapshot scoring, league report, logging
- test_matchup_service.py: Head-to-head scoring

### Commands (league/management/ -> league/tests/commands/)
- test_diversification_report.py

## Running Tests

uv run pytest
uv run pytest league/tests/domain/
"""
