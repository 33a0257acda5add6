from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pricing.services.utils import ZERO, d

ADDITIONAL_SERVICE_CHOICES = ("bubbleWrap", "stickerRemoval", "warningLabels")


@dataclass
class ShipmentLine:
    product_id: str
    quantity: int = 1
    pack_of: int = 1
    unit_price: Decimal = ZERO
    total_price: Decimal = ZERO
    selected_additional_services: List[str] = field(default_factory=list)
    # UI-only: which pricing formula produced the stored price; never persisted
    priced_for: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "ShipmentLine":
        return cls(
            product_id=str(data.get("product_id") or ""),
            quantity=int(data.get("quantity") or 0),
            pack_of=int(data.get("pack_of") or 1),
            unit_price=d(data.get("unit_price") or 0),
            total_price=d(data.get("total_price") or 0),
            selected_additional_services=list(data.get("selected_additional_services") or []),
            priced_for=data.get("priced_for") or None,
        )


@dataclass(frozen=True)
class StockError:
    product_id: str
    product_name: str
    requested: int
    available: int
    unit_noun: str

    def __str__(self) -> str:
        return (
            f"{self.product_name}: Requested {self.requested} {self.unit_noun} "
            f"but only {self.available} available."
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "requested": self.requested,
            "available": self.available,
            "unit_noun": self.unit_noun,
            "message": str(self),
        }
