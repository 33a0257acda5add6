from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from django.db import DatabaseError, transaction

from ..models import ShipmentRequest, ShipmentRequestLine
from .assembler import assemble
from .errors import AuthenticationRequiredError, InsufficientStockError, SubmissionError
from .stock import validate_stock

logger = logging.getLogger(__name__)

SUBMISSION_FAILED_MESSAGE = "Failed to submit shipment request. Please try again."

# Record keys that map one-to-one onto ShipmentRequest columns
_RECORD_COLUMNS = (
    "user_name", "date", "ship_to", "shipment_type", "service", "pallet_sub_type",
    "product_type", "custom_dimensions", "remarks", "label_url", "additional_services",
    "status", "requested_at",
)


def ensure_can_submit(user) -> None:
    if user is None or not getattr(user, "is_authenticated", False):
        raise AuthenticationRequiredError("You must be logged in to submit a shipment request.")
    if not getattr(user, "has_profile", False):
        raise AuthenticationRequiredError("Your account is pending approval.")


def save_shipment_request(record: Dict[str, Any], idempotency_key: Optional[str] = None) -> ShipmentRequest:
    """Store an assembled record and its lines in one transaction."""
    try:
        with transaction.atomic():
            shipment_request = ShipmentRequest.objects.create(
                user_id=record["user_id"],
                requested_by_id=record.get("requested_by"),
                idempotency_key=idempotency_key,
                **{key: record[key] for key in _RECORD_COLUMNS if key in record},
            )
            ShipmentRequestLine.objects.bulk_create(
                ShipmentRequestLine(
                    request=shipment_request,
                    product_id=line["product_id"],
                    quantity=line["quantity"],
                    pack_of=line["pack_of"],
                    unit_price=line["unit_price"],
                    selected_additional_services=line.get("selected_additional_services"),
                )
                for line in record["shipments"]
            )
    except DatabaseError as e:
        logger.exception("Failed to save shipment request for user %s", record.get("user_id"))
        raise SubmissionError(SUBMISSION_FAILED_MESSAGE) from e

    logger.info(
        "Shipment request %s created for user %s (%s, %d lines)",
        shipment_request.pk,
        record["user_id"],
        record["shipment_type"],
        len(record["shipments"]),
    )
    return shipment_request


def submit_shipment_request(
    values: Dict[str, Any],
    user,
    inventory: Iterable,
    requested_at: Optional[datetime] = None,
    idempotency_key: Optional[str] = None,
) -> ShipmentRequest:
    """
    Final submission of a validated, server-repriced shipment request.

    Stock is checked against the given inventory snapshot before anything is
    written; any shortfall aborts the whole request.
    """
    ensure_can_submit(user)

    stock_errors = validate_stock(values["shipments"], inventory, values["shipment_type"])
    if stock_errors:
        logger.info("Shipment request rejected for user %s: %d stock errors", user.pk, len(stock_errors))
        raise InsufficientStockError(stock_errors)

    record = assemble(values, user, requested_at)
    return save_shipment_request(record, idempotency_key)
