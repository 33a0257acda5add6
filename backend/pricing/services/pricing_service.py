from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Iterable, List, Optional

from ..dataclasses import DatedPrice, LinePrice, PricingContext, PricingRule, PricingTables
from ..types import PalletSubType, ProductType, ShipmentType
from .rates import latest_valid_price, resolve_rate
from .utils import ONE, ZERO, d, round2

logger = logging.getLogger(__name__)

NO_PRICE = LinePrice(unit_price=ZERO, total_price=ZERO)


def _to_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _flat_rate_line(unit_price: Optional[Decimal], quantity: int) -> LinePrice:
    """Box and pallet lines: a flat price per box/pallet, or zero when unpriced."""
    if unit_price is None or unit_price <= ZERO:
        return NO_PRICE
    if quantity <= 0:
        return LinePrice(unit_price=round2(unit_price), total_price=ZERO)
    return LinePrice(unit_price=round2(unit_price), total_price=round2(unit_price * quantity))


def price_line(
    shipment_type: str,
    pallet_sub_type: Optional[str],
    service: Optional[str],
    product_type: Optional[str],
    quantity,
    pack_of,
    rules: List[PricingRule],
    box_prices: Iterable[DatedPrice],
    pallet_forwarding_prices: Iterable[DatedPrice],
    pallet_existing_prices: Iterable[DatedPrice],
    brackets=None,
) -> LinePrice:
    """
    Unit and total price for one shipment line.

    Box and pallet lines use the newest flat price for their kind. Custom
    products carry a $1 placeholder unit price and a total equal to the
    quantity; the final figure is set when the request is reviewed. Other
    products are priced per unit from the client's prep grid, plus the pack
    surcharge once for every pack beyond the first.
    """
    quantity = _to_int(quantity)

    if shipment_type == ShipmentType.BOX.value:
        return _flat_rate_line(latest_valid_price(box_prices), quantity)

    if shipment_type == ShipmentType.PALLET.value:
        if pallet_sub_type == PalletSubType.FORWARDING.value:
            return _flat_rate_line(latest_valid_price(pallet_forwarding_prices), quantity)
        if pallet_sub_type == PalletSubType.EXISTING_INVENTORY.value:
            return _flat_rate_line(latest_valid_price(pallet_existing_prices), quantity)
        return NO_PRICE

    if shipment_type != ShipmentType.PRODUCT.value:
        return NO_PRICE

    if product_type == ProductType.CUSTOM.value:
        return LinePrice(unit_price=round2(ONE), total_price=round2(max(quantity, 0)))

    pack_of = _to_int(pack_of) or 1
    total_units = quantity * pack_of
    if total_units <= 0:
        return NO_PRICE

    quote = resolve_rate(rules, service, product_type, total_units, brackets)
    if quote is None or quote.rate <= ZERO:
        return NO_PRICE

    base_total = quote.rate * total_units
    pack_charge = quote.pack_surcharge * max(0, pack_of - 1)
    return LinePrice(unit_price=round2(quote.rate), total_price=round2(base_total + pack_charge))


def price_for(context: PricingContext, quantity, pack_of, tables: PricingTables, brackets=None) -> LinePrice:
    """price_line with the form context and the client's tables bundled."""
    return price_line(
        context.shipment_type,
        context.pallet_sub_type,
        context.service,
        context.product_type,
        quantity,
        pack_of,
        tables.prep_rules,
        tables.box_forwarding,
        tables.pallet_forwarding,
        tables.pallet_existing_inventory,
        brackets,
    )


def apply_line_price(line, price: LinePrice, context: PricingContext) -> bool:
    """
    Store a computed price on a line, writing only fields that differ.

    A zero price for a non-Custom product means the grid has no rate yet, so
    it does not replace a positive price computed under the same formula.
    Box and pallet zeros always replace stale values. Returns True when a
    price field was written.
    """
    key = context.pricing_key
    current_unit = d(line.unit_price or 0)
    current_total = d(line.total_price or 0)
    same_formula = getattr(line, "priced_for", None) in (None, key)

    is_rule_priced_product = (
        context.shipment_type == ShipmentType.PRODUCT.value
        and context.product_type != ProductType.CUSTOM.value
    )
    if is_rule_priced_product and price.unit_price == ZERO and current_unit > ZERO and same_formula:
        return False

    changed = False
    if current_unit != price.unit_price:
        line.unit_price = price.unit_price
        changed = True
    if current_total != price.total_price:
        line.total_price = price.total_price
        changed = True
    line.priced_for = key
    return changed


def reprice_lines(lines, context: PricingContext, tables: PricingTables, brackets=None) -> int:
    """
    Recompute every line of a shipment request in place.

    Skipped entirely while the pricing tables are still loading, so a
    partially loaded grid never writes a transient zero. Returns the number
    of lines whose stored price changed; a second pass returns 0.
    """
    if tables.loading:
        logger.debug("Pricing tables still loading; skipping reprice of %d lines", len(lines))
        return 0

    changed = 0
    for line in lines:
        price = price_for(context, line.quantity, line.pack_of, tables, brackets)
        if apply_line_price(line, price, context):
            changed += 1
    if changed:
        logger.debug("Repriced %d of %d lines for %s", changed, len(lines), context.pricing_key)
    return changed
