from django.urls import path

from .views import ShipmentRequestListCreateView, ShipmentRequestPreviewView

urlpatterns = [
    path('shipment-requests', ShipmentRequestListCreateView.as_view(), name='shipment-request-list-create'),
    path('shipment-requests/preview', ShipmentRequestPreviewView.as_view(), name='shipment-request-preview'),
]
