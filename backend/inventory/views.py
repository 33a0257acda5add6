from rest_framework import generics, serializers

from accounts.permissions import IsApprovedClient
from pricing.types import PalletSubType, ShipmentType, choices
from .models import InventoryItem
from .serializers import InventoryItemSerializer
from .services import selectable_items


class InventoryListView(generics.ListAPIView):
    """Read-only table of the signed-in client's inventory."""
    serializer_class = InventoryItemSerializer
    permission_classes = [IsApprovedClient]

    def get_queryset(self):
        return InventoryItem.objects.filter(user=self.request.user).order_by('product_name', 'id')


class SelectableQuerySerializer(serializers.Serializer):
    shipment_type = serializers.ChoiceField(choices=choices(ShipmentType), default=ShipmentType.PRODUCT.value)
    pallet_sub_type = serializers.ChoiceField(choices=choices(PalletSubType), required=False)
    q = serializers.CharField(required=False, allow_blank=True, default="")


class SelectableInventoryView(generics.ListAPIView):
    """Items that can be picked for a shipment of the requested type."""
    serializer_class = InventoryItemSerializer
    permission_classes = [IsApprovedClient]

    def get_queryset(self):
        params = SelectableQuerySerializer(data=self.request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data
        items = InventoryItem.objects.filter(user=self.request.user).order_by('product_name', 'id')
        return selectable_items(items, data['shipment_type'], data.get('pallet_sub_type'), data.get('q', ''))
