from enum import Enum


class ShipmentType(str, Enum):
    PRODUCT = "product"
    BOX = "box"
    PALLET = "pallet"


class PalletSubType(str, Enum):
    EXISTING_INVENTORY = "existing_inventory"
    FORWARDING = "forwarding"


class PrepService(str, Enum):
    FBA_WFS_TFS = "FBA/WFS/TFS"
    FBM = "FBM"


class ProductType(str, Enum):
    STANDARD = "Standard"
    LARGE = "Large"
    CUSTOM = "Custom"


class Package(str, Enum):
    STARTER = "Starter"
    STANDARD = "Standard"
    SMALL_BUSINESS = "Small Business"
    PREMIUM = "Premium"


def choices(enum_cls):
    return [(member.value, member.value) for member in enum_cls]


PREP_SERVICES = {s.value for s in PrepService}

# Service recorded on box and pallet shipment requests
BOX_FORWARDING_SERVICE = "Box Forwarding"
PALLET_SERVICE_BY_SUB_TYPE = {
    PalletSubType.FORWARDING.value: "Pallet Forwarding",
    PalletSubType.EXISTING_INVENTORY.value: "Pallet Existing Inventory",
}

# Bracket label that matches any quantity; priced by hand
CUSTOM_RANGE = "Custom"
