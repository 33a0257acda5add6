from rest_framework import serializers

from .models import InventoryItem
from .services import format_date_added, status_badge


class InventoryItemSerializer(serializers.ModelSerializer):
    """One row of the read-only inventory table."""
    date_added_display = serializers.SerializerMethodField()
    status_badge = serializers.SerializerMethodField()

    class Meta:
        model = InventoryItem
        fields = [
            "id", "product_name", "sku", "quantity", "status", "inventory_type",
            "date_added", "date_added_display", "status_badge",
        ]
        read_only_fields = fields

    def get_date_added_display(self, obj):
        return format_date_added(obj.date_added)

    def get_status_badge(self, obj):
        return status_badge(obj.status)
