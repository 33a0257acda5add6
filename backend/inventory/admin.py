from django.contrib import admin

from .models import InventoryItem


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "product_name", "sku", "quantity", "status", "inventory_type", "date_added")
    list_filter = ("status", "inventory_type")
    search_fields = ("product_name", "sku", "user__username")
