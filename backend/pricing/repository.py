from __future__ import annotations

import logging

from .dataclasses import DatedPrice, PricingRule, PricingTables
from .models import (
    BoxForwardingPrice,
    PalletExistingInventoryPrice,
    PalletForwardingPrice,
    PrepPricingRule,
)

logger = logging.getLogger(__name__)


def _dated_prices(model, user):
    return [
        DatedPrice(price=row.price, updated_at=row.updated_at, id=row.id)
        for row in model.objects.filter(user=user).order_by('id')
    ]


def load_pricing_tables(user) -> PricingTables:
    """Read every pricing table for one client into memory."""
    rules = [
        PricingRule(
            service=row.service,
            product_type=row.product_type,
            quantity_range=row.quantity_range,
            rate=row.rate,
            pack_of=row.pack_of,
            package=row.package,
            updated_at=row.updated_at,
            id=row.id,
        )
        for row in PrepPricingRule.objects.filter(user=user).order_by('id')
    ]
    tables = PricingTables(
        prep_rules=rules,
        box_forwarding=_dated_prices(BoxForwardingPrice, user),
        pallet_forwarding=_dated_prices(PalletForwardingPrice, user),
        pallet_existing_inventory=_dated_prices(PalletExistingInventoryPrice, user),
    )
    logger.debug(
        "Loaded pricing for user %s: %d prep rules, %d box, %d pallet fwd, %d pallet existing",
        user.pk,
        len(tables.prep_rules),
        len(tables.box_forwarding),
        len(tables.pallet_forwarding),
        len(tables.pallet_existing_inventory),
    )
    return tables
