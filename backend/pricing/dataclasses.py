from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional

from .services.utils import ZERO
from .types import ProductType, ShipmentType


@dataclass(frozen=True)
class PricingRule:
    """One row of a client's prep pricing grid."""
    service: str
    product_type: str
    quantity_range: str
    rate: Decimal
    pack_of: Decimal = ZERO  # surcharge per additional pack, not a pack size
    package: Optional[str] = None
    updated_at: Any = None
    id: Optional[int] = None


@dataclass(frozen=True)
class DatedPrice:
    """A flat box/pallet price; `price` may still be a string straight from storage."""
    price: Any
    updated_at: Any = None
    id: Optional[int] = None


@dataclass(frozen=True)
class RateQuote:
    rate: Decimal
    pack_surcharge: Decimal = ZERO


@dataclass(frozen=True)
class LinePrice:
    unit_price: Decimal
    total_price: Decimal


@dataclass
class PricingTables:
    """Everything the calculator reads for one client."""
    prep_rules: List[PricingRule] = field(default_factory=list)
    box_forwarding: List[DatedPrice] = field(default_factory=list)
    pallet_forwarding: List[DatedPrice] = field(default_factory=list)
    pallet_existing_inventory: List[DatedPrice] = field(default_factory=list)
    loading: bool = False


@dataclass(frozen=True)
class PricingContext:
    """Form-level inputs shared by every line of one shipment request."""
    shipment_type: str
    pallet_sub_type: Optional[str] = None
    service: Optional[str] = None
    product_type: Optional[str] = None

    @property
    def pricing_key(self) -> str:
        """Identifies which formula a stored price came from."""
        if self.shipment_type == ShipmentType.PALLET.value:
            return f"pallet:{self.pallet_sub_type or ''}"
        if self.shipment_type == ShipmentType.PRODUCT.value:
            return "product:custom" if self.product_type == ProductType.CUSTOM.value else "product"
        return self.shipment_type
