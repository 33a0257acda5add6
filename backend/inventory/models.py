from django.conf import settings
from django.db import models
from django.utils import timezone

class InventoryItem(models.Model):
    STATUS_CHOICES = [('In Stock', 'In Stock'), ('Out of Stock', 'Out of Stock')]
    # Blank means an ordinary product, as does 'product'
    INVENTORY_TYPE_CHOICES = [('product', 'Product'), ('box', 'Box'), ('pallet', 'Pallet'), ('container', 'Container')]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='inventory_items')
    product_name = models.CharField(max_length=255)
    sku = models.CharField(max_length=64, blank=True, default='')
    quantity = models.PositiveIntegerField(default=0)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='In Stock')
    inventory_type = models.CharField(max_length=16, choices=INVENTORY_TYPE_CHOICES, blank=True, default='')
    date_added = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['product_name']
        indexes = [
            models.Index(fields=['user', 'inventory_type'], name='inventory_user_type_idx'),
        ]

    def __str__(self):
        return f"{self.product_name} ({self.quantity})"
