from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime, time, timezone as dt_timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional

from django.utils.dateparse import parse_date, parse_datetime

from ..dataclasses import PricingRule, RateQuote
from ..types import PREP_SERVICES
from .brackets import is_quantity_in_range, package_for_quantity
from .utils import ZERO, d

logger = logging.getLogger(__name__)


def _field(record: Any, name: str, default=None):
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def _updated_at(record: Any):
    value = _field(record, "updated_at")
    if value is None and isinstance(record, Mapping):
        value = record.get("updatedAt")
    return value


def to_epoch_millis(value: Any) -> int:
    """
    Normalize a stored timestamp to epoch milliseconds.

    Accepts ISO strings, {"seconds": n} mappings (or objects exposing
    `.seconds`), datetimes and dates. Anything else, including unparseable
    strings, counts as 0 so it sorts as the oldest.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        return _parse_iso_millis(value.strip())
    if isinstance(value, datetime):
        return _datetime_millis(value)
    if isinstance(value, date):
        return _datetime_millis(datetime.combine(value, time.min))
    seconds = _field(value, "seconds")
    if seconds is not None and not isinstance(seconds, bool):
        try:
            return int(d(seconds) * 1000)
        except (InvalidOperation, ValueError, OverflowError):
            return 0
    return 0


def select_latest(records: Iterable[Any]) -> Optional[Any]:
    """Most recently updated record; ties keep input order."""
    ordered = sorted(
        records or [],
        key=lambda r: to_epoch_millis(_updated_at(r)),
        reverse=True,
    )
    return ordered[0] if ordered else None


def coerce_price(value: Any) -> Optional[Decimal]:
    """Decimal price, or None when missing, non-numeric or not positive."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        price = d(value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not price.is_finite() or price <= ZERO:
        return None
    return price


def latest_valid_price(records: Iterable[Any]) -> Optional[Decimal]:
    """Price of the newest record, if that price is usable."""
    latest = select_latest(records)
    if latest is None:
        return None
    return coerce_price(_field(latest, "price"))


def resolve_rate(
    rules: List[PricingRule],
    service: Optional[str],
    product_type: Optional[str],
    total_units: int,
    brackets=None,
) -> Optional[RateQuote]:
    """
    Find the per-unit prep rate and pack surcharge for a unit count.

    Rules must already be scoped to one client. Among rules for the service
    and product type whose bracket contains `total_units`, those tagged with
    the package expected for that count win; the newest of them is used.
    Returns None when nothing applies.
    """
    if not rules or total_units is None or total_units <= 0:
        return None
    if service not in PREP_SERVICES or not product_type:
        return None

    matching = [
        rule for rule in rules
        if rule.service == service
        and rule.product_type == product_type
        and is_quantity_in_range(service, rule.quantity_range, total_units, brackets)
    ]
    if not matching:
        logger.debug("No prep rule for %s/%s at %s units", service, product_type, total_units)
        return None

    expected_package = package_for_quantity(service, total_units, brackets)
    preferred = [rule for rule in matching if rule.package == expected_package] if expected_package else []
    # Package tags can drift from bracket labels; fall back to the bracket match alone
    latest = select_latest(preferred or matching)

    return RateQuote(
        rate=_decimal_or_zero(latest.rate),
        pack_surcharge=_decimal_or_zero(latest.pack_of),
    )


# Private helpers

def _parse_iso_millis(raw: str) -> int:
    if not raw:
        return 0
    try:
        parsed = parse_datetime(raw)
        if parsed is None:
            day = parse_date(raw)
            if day is None:
                return 0
            parsed = datetime.combine(day, time.min)
    except ValueError:
        return 0
    return _datetime_millis(parsed)


def _datetime_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt_timezone.utc)
    return int(value.timestamp() * 1000)


def _decimal_or_zero(value: Any) -> Decimal:
    if value is None:
        return ZERO
    try:
        amount = d(value)
    except (InvalidOperation, ValueError, TypeError):
        return ZERO
    return amount if amount.is_finite() else ZERO
