from __future__ import annotations

import logging
from typing import List

from pricing.dataclasses import PricingContext, PricingTables
from pricing.services.pricing_service import apply_line_price, price_for
from ..dataclasses import ShipmentLine

logger = logging.getLogger(__name__)


def toggle_line(
    lines: List[ShipmentLine],
    product_id,
    selected: bool,
    context: PricingContext,
    tables: PricingTables,
    brackets=None,
) -> List[ShipmentLine]:
    """
    Add or remove the line for one product; returns a new list.

    A newly selected product starts at one unit, pack of one, already priced
    for the current shipment type. Selecting a present product or deselecting
    an absent one changes nothing.
    """
    product_id = str(product_id or "")
    if not product_id:
        raise ValueError("product_id is required")

    present = any(line.product_id == product_id for line in lines)

    if selected and not present:
        line = ShipmentLine(product_id=product_id, quantity=1, pack_of=1)
        if not tables.loading:
            apply_line_price(line, price_for(context, line.quantity, line.pack_of, tables, brackets), context)
        logger.debug("Selected product %s priced at %s", product_id, line.unit_price)
        return [*lines, line]

    if not selected and present:
        return [line for line in lines if line.product_id != product_id]

    return list(lines)
