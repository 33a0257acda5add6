from django.contrib import admin, messages
from django.utils import timezone

from pricing.models import (
    BoxForwardingPrice,
    PalletExistingInventoryPrice,
    PalletForwardingPrice,
    PrepPricingRule,
)
from pricing.services.brackets import find_bracket


class TouchUpdatedAtMixin:
    """Admin edits become the newest price for the client."""

    def save_model(self, request, obj, form, change):
        obj.updated_at = timezone.now()
        super().save_model(request, obj, form, change)


@admin.register(PrepPricingRule)
class PrepPricingRuleAdmin(TouchUpdatedAtMixin, admin.ModelAdmin):
    list_display = (
        "id",
        "user",
        "service",
        "product_type",
        "package",
        "quantity_range",
        "rate",
        "pack_of",
        "updated_at",
    )
    list_filter = ("service", "product_type", "package")
    search_fields = ("user__username", "user__email")
    actions = ["validate_ranges"]

    def validate_ranges(self, request, queryset):
        any_warn = False
        for rule in queryset:
            if rule.quantity_range == "Custom":
                continue
            if find_bracket(rule.service, rule.quantity_range) is None:
                any_warn = True
                messages.warning(request, f"Rule {rule.id}: unknown quantity range '{rule.quantity_range}' for {rule.service}")
        if not any_warn:
            messages.info(request, "Selected rules use known quantity ranges.")

    validate_ranges.short_description = "Validate quantity range labels"


@admin.register(BoxForwardingPrice)
class BoxForwardingPriceAdmin(TouchUpdatedAtMixin, admin.ModelAdmin):
    list_display = ("id", "user", "price", "updated_at")
    search_fields = ("user__username",)


@admin.register(PalletForwardingPrice)
class PalletForwardingPriceAdmin(TouchUpdatedAtMixin, admin.ModelAdmin):
    list_display = ("id", "user", "price", "updated_at")
    search_fields = ("user__username",)


@admin.register(PalletExistingInventoryPrice)
class PalletExistingInventoryPriceAdmin(TouchUpdatedAtMixin, admin.ModelAdmin):
    list_display = ("id", "user", "price", "updated_at")
    search_fields = ("user__username",)
