from __future__ import annotations

from rest_framework import serializers

from .models import (
    BoxForwardingPrice,
    PalletExistingInventoryPrice,
    PalletForwardingPrice,
    PrepPricingRule,
)
from .types import PalletSubType, PrepService, ProductType, ShipmentType, choices


class PrepPricingRuleSerializer(serializers.ModelSerializer):
    class Meta:
        model = PrepPricingRule
        fields = ("id", "service", "product_type", "package", "quantity_range", "rate", "pack_of", "updated_at")


class DatedPriceSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    updated_at = serializers.DateTimeField()


class PricingTablesSerializer(serializers.Serializer):
    """Read-only projection of one client's pricing."""
    prep_rules = PrepPricingRuleSerializer(many=True)
    box_forwarding = DatedPriceSerializer(many=True)
    pallet_forwarding = DatedPriceSerializer(many=True)
    pallet_existing_inventory = DatedPriceSerializer(many=True)


class PricingContextSerializer(serializers.Serializer):
    shipment_type = serializers.ChoiceField(choices=choices(ShipmentType))
    pallet_sub_type = serializers.ChoiceField(choices=choices(PalletSubType), required=False, allow_null=True, allow_blank=True)
    service = serializers.ChoiceField(choices=choices(PrepService), required=False, allow_null=True, allow_blank=True)
    product_type = serializers.ChoiceField(choices=choices(ProductType), required=False, allow_null=True, allow_blank=True)


class PriceLineRequestSerializer(PricingContextSerializer):
    quantity = serializers.IntegerField(min_value=0)
    pack_of = serializers.IntegerField(min_value=1, required=False, default=1)


class LinePriceSerializer(serializers.Serializer):
    unit_price = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_price = serializers.DecimalField(max_digits=14, decimal_places=2)
