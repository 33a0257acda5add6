from django.urls import path

from .views import InventoryListView, SelectableInventoryView

urlpatterns = [
    path('inventory/', InventoryListView.as_view(), name='inventory-list'),
    path('inventory/selectable', SelectableInventoryView.as_view(), name='inventory-selectable'),
]
