from inventory.services import InventorySnapshotItem
from ..dataclasses import ShipmentLine
from ..services.stock import validate_stock

INVENTORY = [
    InventorySnapshotItem(id="1", product_name="Widget", quantity=30),
    InventorySnapshotItem(id="2", product_name="Gadget", quantity=4),
]


def test_exact_stock_passes():
    lines = [ShipmentLine(product_id="1", quantity=10, pack_of=3)]
    assert validate_stock(lines, INVENTORY, "product") == []


def test_one_unit_over_fails():
    lines = [ShipmentLine(product_id="1", quantity=31, pack_of=1)]
    errors = validate_stock(lines, INVENTORY, "product")
    assert len(errors) == 1
    assert str(errors[0]) == "Widget: Requested 31 units but only 30 available."


def test_pack_of_ignored_for_box_and_pallet():
    lines = [ShipmentLine(product_id="2", quantity=4, pack_of=10)]
    assert validate_stock(lines, INVENTORY, "box") == []

    errors = validate_stock([ShipmentLine(product_id="2", quantity=5)], INVENTORY, "pallet")
    assert str(errors[0]) == "Gadget: Requested 5 pallets but only 4 available."

    errors = validate_stock([ShipmentLine(product_id="2", quantity=5)], INVENTORY, "box")
    assert errors[0].unit_noun == "boxes"


def test_unknown_products_are_skipped():
    lines = [ShipmentLine(product_id="missing", quantity=1000)]
    assert validate_stock(lines, INVENTORY, "product") == []


def test_every_short_line_is_reported():
    lines = [
        ShipmentLine(product_id="1", quantity=16, pack_of=2),
        ShipmentLine(product_id="2", quantity=5),
    ]
    errors = validate_stock(lines, INVENTORY, "product")
    assert [(e.product_name, e.requested, e.available) for e in errors] == [("Widget", 32, 30), ("Gadget", 5, 4)]
    assert errors[0].to_dict()["message"] == "Widget: Requested 32 units but only 30 available."
