"""
Custom Django system checks for the league application.

These checks run automatically with `manage.py check` and on server startup.
They are registered from ``LeagueConfig.ready()``.
"""

from django.conf import settings
from django.core.checks import Error, register

import structlog

from league.domain.tiers import (
    TIER_ALLOCATIONS,
    DiversificationTier,
    get_tier,
    validate_allocation,
)
from league.exceptions import AllocationError, UnknownTierError

logger = structlog.get_logger(__name__)


@register()
def check_tier_allocations(app_configs, **kwargs):
    """
    Verify that every tier preset covers all buckets and sums to 100%.

    Returns:
        List of Error objects, one per invalid tier.
    """
    errors = []
    for tier in DiversificationTier:
        allocation = TIER_ALLOCATIONS.get(tier)
        if allocation is None:
            errors.append(
                Error(
                    f"Diversification tier '{tier}' has no target allocation",
                    id="league.E001",
                )
            )
            continue
        try:
            validate_allocation(allocation)
        except AllocationError as exc:
            logger.error("tier_allocation_invalid", tier=tier.value, error=str(exc))
            errors.append(
                Error(
                    f"Diversification tier '{tier}' is invalid: {exc}",
                    id="league.E001",
                )
            )
    return errors


@register()
def check_default_tier(app_configs, **kwargs):
    """Verify that ``LEAGUE_DEFAULT_TIER`` names a known tier."""
    configured = getattr(settings, "LEAGUE_DEFAULT_TIER", None)
    if configured is None:
        return []
    try:
        get_tier(configured)
    except UnknownTierError as exc:
        return [
            Error(
                str(exc),
                hint="Set LEAGUE_DEFAULT_TIER to cautious, moderate or aggressive",
                id="league.E002",
            )
        ]
    return []
