from __future__ import annotations

from rest_framework import serializers

from pricing.dataclasses import PricingContext
from pricing.serializers import PricingContextSerializer
from pricing.services.pricing_service import reprice_lines
from pricing.services.utils import ZERO
from pricing.types import PREP_SERVICES, PalletSubType, ProductType, ShipmentType, choices
from .dataclasses import ADDITIONAL_SERVICE_CHOICES, ShipmentLine
from .models import ShipmentRequest, ShipmentRequestLine


def context_from(data) -> PricingContext:
    return PricingContext(
        shipment_type=data.get("shipment_type"),
        pallet_sub_type=data.get("pallet_sub_type") or None,
        service=data.get("service") or None,
        product_type=data.get("product_type") or None,
    )


class ShipmentLineSerializer(serializers.Serializer):
    product_id = serializers.CharField(error_messages={"blank": "Select a product.", "required": "Select a product."})
    quantity = serializers.IntegerField(min_value=1, error_messages={"min_value": "Quantity must be at least 1."})
    pack_of = serializers.IntegerField(min_value=1, required=False, default=1)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=4, min_value=0, required=False, default=ZERO)
    total_price = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=0, required=False, default=ZERO)
    selected_additional_services = serializers.ListField(
        child=serializers.ChoiceField(choices=ADDITIONAL_SERVICE_CHOICES), required=False, default=list
    )
    priced_for = serializers.CharField(required=False, allow_null=True, allow_blank=True, write_only=True)


class ShipmentRequestFormSerializer(serializers.Serializer):
    """
    Validates a shipment request as submitted by the client.

    When `pricing_tables` is in the serializer context every line is repriced
    from those tables before the price rule is checked, so client-sent prices
    only survive where the grid has no rate.
    """
    shipment_type = serializers.ChoiceField(choices=choices(ShipmentType))
    pallet_sub_type = serializers.ChoiceField(choices=choices(PalletSubType), required=False, allow_null=True, allow_blank=True)
    service = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    product_type = serializers.ChoiceField(choices=choices(ProductType), required=False, allow_null=True, allow_blank=True)
    custom_dimensions = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    shipments = ShipmentLineSerializer(many=True)
    date = serializers.DateField()
    ship_to = serializers.CharField(required=False, allow_blank=True, default="")
    remarks = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    bubble_wrap_feet = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    sticker_removal_items = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    warning_labels = serializers.IntegerField(min_value=0, required=False, allow_null=True)

    def validate_shipments(self, value):
        if not value:
            raise serializers.ValidationError("Select at least one item to ship.")
        product_ids = [line["product_id"] for line in value]
        if len(product_ids) != len(set(product_ids)):
            raise serializers.ValidationError("Each product can only be added once.")
        return value

    def validate(self, attrs):
        errors = {}
        shipment_type = attrs["shipment_type"]
        service = attrs.get("service")
        product_type = attrs.get("product_type")

        if shipment_type == ShipmentType.PRODUCT.value:
            if not service or not product_type:
                errors["service"] = ["Service and product type are required for product shipments."]
            elif service not in PREP_SERVICES:
                errors["service"] = ["Select a valid prep service."]
            if product_type == ProductType.CUSTOM.value and not (attrs.get("custom_dimensions") or "").strip():
                errors["custom_dimensions"] = ["Custom dimensions are required for Custom product type."]

        if shipment_type == ShipmentType.PALLET.value and not attrs.get("pallet_sub_type"):
            errors["pallet_sub_type"] = ["Please select pallet sub-type."]

        if errors:
            raise serializers.ValidationError(errors)

        lines = [ShipmentLine.from_mapping(line) for line in attrs["shipments"]]
        tables = self.context.get("pricing_tables")
        if tables is not None:
            reprice_lines(lines, context_from(attrs), tables, self.context.get("brackets"))

        if shipment_type == ShipmentType.PRODUCT.value and product_type != ProductType.CUSTOM.value:
            if any(line.unit_price <= ZERO for line in lines):
                raise serializers.ValidationError({"shipments": ["Unit price must be a positive number."]})

        attrs["shipments"] = lines
        return attrs


class ToggleSerializer(serializers.Serializer):
    product_id = serializers.CharField()
    selected = serializers.BooleanField()


class ShipmentPreviewSerializer(PricingContextSerializer):
    """Draft form state to be priced and stock-checked without saving."""
    shipments = ShipmentLineSerializer(many=True, required=False, default=list)
    toggle = ToggleSerializer(required=False)


class ShipmentRequestLineSerializer(serializers.ModelSerializer):
    class Meta:
        model = ShipmentRequestLine
        fields = ("product_id", "quantity", "pack_of", "unit_price", "selected_additional_services")


class ShipmentRequestSerializer(serializers.ModelSerializer):
    shipments = ShipmentRequestLineSerializer(many=True, read_only=True)

    class Meta:
        model = ShipmentRequest
        fields = (
            "id", "user", "user_name", "date", "ship_to", "shipment_type", "service",
            "pallet_sub_type", "product_type", "custom_dimensions", "remarks", "label_url",
            "additional_services", "status", "requested_by", "requested_at", "shipments",
        )
        read_only_fields = fields


class PricedLineSerializer(serializers.Serializer):
    product_id = serializers.CharField()
    quantity = serializers.IntegerField()
    pack_of = serializers.IntegerField()
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_price = serializers.DecimalField(max_digits=14, decimal_places=2)
    selected_additional_services = serializers.ListField(child=serializers.CharField())
    priced_for = serializers.CharField(allow_null=True)
