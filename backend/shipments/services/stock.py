from __future__ import annotations

import logging
from typing import Iterable, List

from pricing.types import ShipmentType
from ..dataclasses import ShipmentLine, StockError

logger = logging.getLogger(__name__)

UNIT_NOUNS = {
    ShipmentType.BOX.value: "boxes",
    ShipmentType.PALLET.value: "pallets",
}


def validate_stock(lines: Iterable[ShipmentLine], inventory: Iterable, shipment_type: str) -> List[StockError]:
    """
    Check every line against the client's inventory.

    Lines whose product is no longer in the snapshot are skipped. Product
    lines need quantity x pack_of units; box and pallet lines ship whole
    boxes/pallets, so pack size does not apply.
    """
    by_id = {str(item.id): item for item in inventory}
    unit_noun = UNIT_NOUNS.get(shipment_type, "units")
    errors = []

    for line in lines:
        item = by_id.get(str(line.product_id))
        if item is None:
            logger.debug("Product %s not in inventory snapshot; skipping stock check", line.product_id)
            continue

        pack_of = (line.pack_of or 1) if shipment_type == ShipmentType.PRODUCT.value else 1
        required = line.quantity * pack_of
        if required > item.quantity:
            errors.append(
                StockError(
                    product_id=str(line.product_id),
                    product_name=item.product_name,
                    requested=required,
                    available=item.quantity,
                    unit_noun=unit_noun,
                )
            )

    return errors
