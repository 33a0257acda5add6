"""
Build the stored shipment request record from validated form values.

The record carries only what the warehouse needs: derived service names for
box and pallet shipments, persisted line fields, and no optional field that
has no meaningful value. Absent optionals are omitted rather than stored as
null.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Dict, Optional

from django.utils import timezone

from pricing.services.utils import d
from pricing.types import (
    BOX_FORWARDING_SERVICE,
    PALLET_SERVICE_BY_SUB_TYPE,
    ProductType,
    ShipmentType,
)

ADDITIONAL_SERVICE_FIELDS = ("bubble_wrap_feet", "sticker_removal_items", "warning_labels")


def derive_service(shipment_type: str, pallet_sub_type: Optional[str], service: Optional[str]) -> Optional[str]:
    if shipment_type == ShipmentType.BOX.value:
        return BOX_FORWARDING_SERVICE
    if shipment_type == ShipmentType.PALLET.value:
        return PALLET_SERVICE_BY_SUB_TYPE.get(pallet_sub_type)
    return service or None


def assemble(values: Mapping, user, requested_at: Optional[datetime] = None) -> Dict[str, Any]:
    shipment_type = values.get("shipment_type")
    is_product = shipment_type == ShipmentType.PRODUCT.value
    is_pallet = shipment_type == ShipmentType.PALLET.value
    pallet_sub_type = values.get("pallet_sub_type") if is_pallet else None

    record = {
        "user_id": user.pk,
        "user_name": getattr(user, "display_name", None) or user.get_username(),
        "date": values.get("date"),
        "ship_to": values.get("ship_to") or "",
        "shipment_type": shipment_type,
        "service": derive_service(shipment_type, pallet_sub_type, values.get("service")),
        "label_url": values.get("label_url") or "",
        "status": "pending",
        "requested_by": user.pk,
        "requested_at": requested_at or timezone.now(),
        "shipments": [_persisted_line(line) for line in values.get("shipments") or []],
    }

    if _has_text(pallet_sub_type):
        record["pallet_sub_type"] = pallet_sub_type

    product_type = values.get("product_type") if is_product else None
    if _has_text(product_type):
        record["product_type"] = product_type
        custom_dimensions = values.get("custom_dimensions")
        if product_type == ProductType.CUSTOM.value and _has_text(custom_dimensions):
            record["custom_dimensions"] = custom_dimensions.strip()

    remarks = values.get("remarks")
    if _has_text(remarks):
        record["remarks"] = remarks.strip()

    additional = {}
    for name in ADDITIONAL_SERVICE_FIELDS:
        count = values.get(name)
        if count and int(count) > 0:
            additional[name] = int(count)
    if additional:
        record["additional_services"] = additional

    return remove_undefined(record)


def remove_undefined(obj: Any) -> Any:
    """
    Drop None values from nested dicts and lists.

    Dates, datetimes and {"seconds": ...} timestamps are kept whole.
    """
    if isinstance(obj, (datetime, date)):
        return obj
    if isinstance(obj, Mapping):
        if "seconds" in obj:
            return obj
        return {key: remove_undefined(value) for key, value in obj.items() if value is not None}
    if isinstance(obj, (list, tuple)):
        return [remove_undefined(item) for item in obj if item is not None]
    return obj


# Private helpers

def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _line_field(line: Any, name: str, default=None):
    if isinstance(line, Mapping):
        return line.get(name, default)
    return getattr(line, name, default)


def _persisted_line(line: Any) -> Dict[str, Any]:
    persisted = {
        "product_id": str(_line_field(line, "product_id")),
        "quantity": int(_line_field(line, "quantity") or 0),
        "pack_of": int(_line_field(line, "pack_of") or 1),
        "unit_price": d(_line_field(line, "unit_price") or 0),
    }
    services = _line_field(line, "selected_additional_services")
    if services:
        persisted["selected_additional_services"] = list(services)
    return persisted
