from django.conf import settings
from django.db import models
from django.utils import timezone

from .types import Package, PrepService, ProductType, choices


class PrepPricingRule(models.Model):
    id = models.BigAutoField(primary_key=True)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, models.CASCADE, related_name='prep_pricing_rules')
    service = models.CharField(max_length=16, choices=choices(PrepService))
    product_type = models.CharField(max_length=16, choices=choices(ProductType))
    package = models.CharField(max_length=32, choices=choices(Package), blank=True, null=True)
    # Bracket label, e.g. "<50", "501-1000", "25+"; bounds live in pricing/config
    quantity_range = models.CharField(max_length=16)
    rate = models.DecimalField(max_digits=12, decimal_places=4)
    # Surcharge per pack beyond the first, not a pack size
    pack_of = models.DecimalField(max_digits=12, decimal_places=4, default=0)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'prep_pricing_rules'
        indexes = [
            models.Index(fields=['user', 'service', 'product_type'], name='prep_rules_user_svc_idx'),
        ]

    def __str__(self):
        return f"{self.user} {self.service} {self.product_type} {self.quantity_range} @ {self.rate}"


class DatedPriceBase(models.Model):
    id = models.BigAutoField(primary_key=True)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        abstract = True

    def __str__(self):
        return f"{self.user} {self.price} ({self.updated_at:%Y-%m-%d})"


class BoxForwardingPrice(DatedPriceBase):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, models.CASCADE, related_name='box_forwarding_prices')

    class Meta:
        db_table = 'box_forwarding_prices'


class PalletForwardingPrice(DatedPriceBase):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, models.CASCADE, related_name='pallet_forwarding_prices')

    class Meta:
        db_table = 'pallet_forwarding_prices'


class PalletExistingInventoryPrice(DatedPriceBase):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, models.CASCADE, related_name='pallet_existing_inventory_prices')

    class Meta:
        db_table = 'pallet_existing_inventory_prices'
