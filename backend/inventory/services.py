from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timezone as dt_timezone
from typing import Any, Iterable, List, Optional

from django.utils import dateformat, timezone
from django.utils.dateparse import parse_date, parse_datetime

from pricing.types import PalletSubType, ShipmentType

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
DATE_DISPLAY_FORMAT = "F jS, Y"  # October 18th, 2026

# Never offered for product shipments or existing-inventory pallets
NON_PRODUCT_TYPES = {"box", "pallet", "container"}


@dataclass(frozen=True)
class InventorySnapshotItem:
    id: str
    product_name: str
    quantity: int
    status: str = "In Stock"
    inventory_type: Optional[str] = None
    date_added: Any = None


def snapshot_for(user) -> List[InventorySnapshotItem]:
    """Point-in-time copy of a client's inventory."""
    from .models import InventoryItem

    return [
        InventorySnapshotItem(
            id=str(item.pk),
            product_name=item.product_name,
            quantity=item.quantity,
            status=item.status,
            inventory_type=item.inventory_type or None,
            date_added=item.date_added,
        )
        for item in InventoryItem.objects.filter(user=user)
    ]


def is_selectable(item, shipment_type: str, pallet_sub_type: Optional[str] = None) -> bool:
    inventory_type = (getattr(item, "inventory_type", None) or "").lower()
    if shipment_type == ShipmentType.BOX.value:
        return inventory_type == "box"
    if shipment_type == ShipmentType.PALLET.value:
        if pallet_sub_type == PalletSubType.FORWARDING.value:
            return inventory_type == "pallet"
        if pallet_sub_type == PalletSubType.EXISTING_INVENTORY.value:
            return inventory_type not in NON_PRODUCT_TYPES
        return False
    return inventory_type not in NON_PRODUCT_TYPES


def selectable_items(items: Iterable, shipment_type: str, pallet_sub_type: Optional[str] = None, query: str = "") -> list:
    """Items in stock that can go on a shipment of this type, filtered by name."""
    needle = (query or "").strip().lower()
    return [
        item for item in items
        if (item.quantity or 0) > 0
        and is_selectable(item, shipment_type, pallet_sub_type)
        and needle in (item.product_name or "").lower()
    ]


def format_date_added(value: Any) -> str:
    """
    Human date for the inventory table.

    Accepts ISO strings, {"seconds": n} timestamps, datetimes and dates;
    anything unparseable renders as "N/A".
    """
    moment = _coerce_moment(value)
    if moment is None:
        return NOT_AVAILABLE
    if isinstance(moment, datetime) and timezone.is_aware(moment):
        moment = timezone.localtime(moment)
    return dateformat.format(moment, DATE_DISPLAY_FORMAT)


def status_badge(status: str) -> str:
    return "secondary" if status == "In Stock" else "destructive"


# Private helpers

def _coerce_moment(value: Any):
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (datetime, date)):
        return value
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        try:
            return parse_datetime(raw) or parse_date(raw)
        except ValueError:
            logger.debug("Unparseable date_added %r", raw)
            return None
    seconds = value.get("seconds") if isinstance(value, Mapping) else getattr(value, "seconds", None)
    if seconds is None or isinstance(seconds, bool):
        return None
    try:
        return datetime.fromtimestamp(float(seconds), tz=dt_timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return None
