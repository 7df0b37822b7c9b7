from typing import Any

from django.core.management.base import BaseCommand, CommandParser

import pandas as pd

from league.domain.tiers import TIER_ALLOCATIONS, DiversificationTier, get_tier
from league.exceptions import UnknownTierError
from league.models import League
from league.services import DiversificationService


class Command(BaseCommand):
    help = "Print each member's diversification modifier and game score for a league."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("league", help="League name")
        parser.add_argument(
            "--tier",
            choices=[tier.value for tier in DiversificationTier],
            help="Preview scores under a different tier than the league's own",
        )

    def handle(self, *args: Any, **options: Any) -> None:
        name = options["league"]
        try:
            league = League.objects.get(name=name)
        except League.DoesNotExist:
            self.stdout.write(self.style.ERROR(f"League {name} does not exist."))
            return

        try:
            tier = get_tier(options["tier"] or league.tier)
        except UnknownTierError as exc:
            self.stdout.write(self.style.ERROR(str(exc)))
            return

        self.stdout.write("\n" + "=" * 80)
        self.stdout.write(f"DIVERSIFICATION REPORT: {league.name}")
        self.stdout.write("=" * 80 + "\n")

        targets = ", ".join(f"{bucket} {pct}%" for bucket, pct in TIER_ALLOCATIONS[tier].items())
        self.stdout.write(f"Tier: {tier.label} ({targets})")
        if tier != league.tier:
            self.stdout.write(self.style.WARNING(f"Previewing; league tier is {league.tier.label}"))

        report = DiversificationService().league_report(league, tier)
        if report.empty:
            self.stdout.write("No portfolio snapshots in this league yet.")
            return

        with pd.option_context("display.width", 200, "display.max_columns", None):
            self.stdout.write(report.to_string(index=False))

        self.stdout.write(self.style.SUCCESS(f"\nScored {len(report)} members."))
