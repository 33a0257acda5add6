from django.contrib import admin

from .models import ShipmentRequest, ShipmentRequestLine


class ShipmentRequestLineInline(admin.TabularInline):
    model = ShipmentRequestLine
    extra = 0


@admin.register(ShipmentRequest)
class ShipmentRequestAdmin(admin.ModelAdmin):
    list_display = ("id", "user_name", "shipment_type", "service", "date", "ship_to", "status", "requested_at")
    list_filter = ("status", "shipment_type", "service", "requested_at")
    search_fields = ("user_name", "user__username", "ship_to", "remarks")
    date_hierarchy = "requested_at"
    readonly_fields = ("requested_by", "requested_at", "idempotency_key")
    inlines = [ShipmentRequestLineInline]
