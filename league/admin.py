from django.contrib import admin

from .models import Holding, League, PortfolioSnapshot


class LeagueAdmin(admin.ModelAdmin):
    list_display = ("name", "diversification_tier", "get_member_count", "created_date")
    list_filter = ("diversification_tier",)
    search_fields = ("name",)

    @admin.display(description="Members")
    def get_member_count(self, obj: League) -> int:
        return obj.snapshots.values("user").distinct().count()


class HoldingInline(admin.TabularInline):
    model = Holding
    extra = 0
    fields = ("symbol", "name", "sector", "allocation", "is_active", "get_bucket")
    readonly_fields = ("get_bucket",)

    @admin.display(description="Bucket")
    def get_bucket(self, obj: Holding) -> str:
        return obj.bucket.value if obj.pk else "-"


class PortfolioSnapshotAdmin(admin.ModelAdmin):
    list_display = ("user", "league", "as_of", "weekly_growth_pct", "get_modifier")
    list_filter = ("league", "as_of")
    search_fields = ("user__username", "league__name")
    date_hierarchy = "as_of"
    inlines = (HoldingInline,)

    @admin.display(description="Modifier")
    def get_modifier(self, obj: PortfolioSnapshot) -> str:
        return f"{obj.diversification().modifier:.2f}x"


class HoldingAdmin(admin.ModelAdmin):
    list_display = ("symbol", "snapshot", "sector", "allocation", "is_active", "get_bucket")
    list_filter = ("is_active", "snapshot__league")
    search_fields = ("symbol", "name", "sector")

    @admin.display(description="Bucket")
    def get_bucket(self, obj: Holding) -> str:
        return obj.bucket.value


admin.site.register(League, LeagueAdmin)
admin.site.register(PortfolioSnapshot, PortfolioSnapshotAdmin)
admin.site.register(Holding, HoldingAdmin)
