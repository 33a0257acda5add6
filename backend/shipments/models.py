from django.conf import settings
from django.db import models
from django.utils import timezone

from pricing.types import PalletSubType, ProductType, ShipmentType, choices


class ShipmentRequest(models.Model):
    STATUS_CHOICES = [('pending', 'Pending'), ('confirmed', 'Confirmed'), ('shipped', 'Shipped'), ('cancelled', 'Cancelled')]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='shipment_requests')
    user_name = models.CharField(max_length=255, blank=True)
    date = models.DateField()
    ship_to = models.CharField(max_length=255, blank=True)
    shipment_type = models.CharField(max_length=16, choices=choices(ShipmentType))
    service = models.CharField(max_length=32, blank=True, null=True)
    pallet_sub_type = models.CharField(max_length=32, choices=choices(PalletSubType), blank=True, null=True)
    product_type = models.CharField(max_length=16, choices=choices(ProductType), blank=True, null=True)
    custom_dimensions = models.CharField(max_length=255, blank=True, null=True)
    remarks = models.TextField(blank=True, null=True)
    label_url = models.URLField(max_length=500, blank=True, default='')
    # Only the services with a positive count are stored
    additional_services = models.JSONField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending')
    requested_by = models.ForeignKey(settings.AUTH_USER_MODEL, null=True, on_delete=models.SET_NULL, related_name='+')
    requested_at = models.DateTimeField(default=timezone.now)
    idempotency_key = models.CharField(max_length=64, null=True, blank=True)

    class Meta:
        db_table = 'shipment_requests'
        ordering = ['-requested_at']
        indexes = [
            models.Index(fields=['user', '-requested_at'], name='shipreq_user_requested_idx'),
        ]
        constraints = [
            models.UniqueConstraint(fields=['user', 'idempotency_key'], name='shipreq_user_idem_uniq'),
        ]

    def __str__(self):
        return f"{self.user_name or self.user_id} {self.shipment_type} {self.date}"


class ShipmentRequestLine(models.Model):
    request = models.ForeignKey(ShipmentRequest, on_delete=models.CASCADE, related_name='shipments')
    # Inventory item id at the time of the request; items may be removed later
    product_id = models.CharField(max_length=64)
    quantity = models.PositiveIntegerField()
    pack_of = models.PositiveIntegerField(default=1)
    unit_price = models.DecimalField(max_digits=12, decimal_places=4, default=0)
    selected_additional_services = models.JSONField(blank=True, null=True)

    class Meta:
        db_table = 'shipment_request_lines'
        ordering = ['id']

    def __str__(self):
        return f"{self.product_id} x{self.quantity}"
