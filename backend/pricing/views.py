from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response

from accounts.permissions import IsApprovedClient
from .dataclasses import PricingContext
from .models import (
    BoxForwardingPrice,
    PalletExistingInventoryPrice,
    PalletForwardingPrice,
    PrepPricingRule,
)
from .repository import load_pricing_tables
from .serializers import LinePriceSerializer, PriceLineRequestSerializer, PricingTablesSerializer
from .services.pricing_service import price_for


class PricingTablesView(APIView):
    """The signed-in client's pricing grid and flat forwarding prices."""
    permission_classes = [IsApprovedClient]

    def get(self, request):
        user = request.user
        payload = {
            "prep_rules": PrepPricingRule.objects.filter(user=user).order_by("service", "product_type", "id"),
            "box_forwarding": BoxForwardingPrice.objects.filter(user=user).order_by("-updated_at"),
            "pallet_forwarding": PalletForwardingPrice.objects.filter(user=user).order_by("-updated_at"),
            "pallet_existing_inventory": PalletExistingInventoryPrice.objects.filter(user=user).order_by("-updated_at"),
        }
        return Response(PricingTablesSerializer(payload).data, status=status.HTTP_200_OK)


class PriceLineView(APIView):
    """Price a single line against the signed-in client's tables."""
    permission_classes = [IsApprovedClient]

    def post(self, request):
        ser = PriceLineRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        context = PricingContext(
            shipment_type=data["shipment_type"],
            pallet_sub_type=data.get("pallet_sub_type") or None,
            service=data.get("service") or None,
            product_type=data.get("product_type") or None,
        )
        price = price_for(context, data["quantity"], data.get("pack_of", 1), load_pricing_tables(request.user))
        return Response(LinePriceSerializer(price).data, status=status.HTTP_200_OK)
