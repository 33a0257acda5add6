from datetime import date, datetime, timezone as dt_timezone

import pytest

from ..services import (
    InventorySnapshotItem,
    format_date_added,
    selectable_items,
    status_badge,
)


def _item(id, name, quantity=10, inventory_type=None):
    return InventorySnapshotItem(id=str(id), product_name=name, quantity=quantity, inventory_type=inventory_type)


ITEMS = [
    _item(1, "Blue Widget"),
    _item(2, "Red Widget", inventory_type="product"),
    _item(3, "Shipping Box", inventory_type="box"),
    _item(4, "Pallet A", inventory_type="pallet"),
    _item(5, "Container 40ft", inventory_type="container"),
    _item(6, "Empty Widget", quantity=0),
]


def _names(items):
    return [item.product_name for item in items]


class TestSelectableItems:

    def test_product_shipments_exclude_boxes_pallets_containers(self):
        assert _names(selectable_items(ITEMS, "product")) == ["Blue Widget", "Red Widget"]

    def test_box_shipments_only_boxes(self):
        assert _names(selectable_items(ITEMS, "box")) == ["Shipping Box"]

    def test_pallet_forwarding_only_pallets(self):
        assert _names(selectable_items(ITEMS, "pallet", "forwarding")) == ["Pallet A"]

    def test_pallet_existing_inventory_offers_products(self):
        assert _names(selectable_items(ITEMS, "pallet", "existing_inventory")) == ["Blue Widget", "Red Widget"]

    def test_pallet_without_sub_type_offers_nothing(self):
        assert selectable_items(ITEMS, "pallet") == []

    def test_name_query_is_case_insensitive(self):
        assert _names(selectable_items(ITEMS, "product", query="  RED ")) == ["Red Widget"]


class TestDisplayHelpers:

    def test_iso_string(self):
        assert format_date_added("2026-10-18T16:00:00Z") == "October 18th, 2026"

    def test_seconds_mapping(self):
        # 2026-10-18T16:00:00Z
        assert format_date_added({"seconds": 1792339200}) == "October 18th, 2026"

    def test_datetime_and_date(self):
        assert format_date_added(datetime(2026, 3, 1, 16, 0, tzinfo=dt_timezone.utc)) == "March 1st, 2026"
        assert format_date_added(date(2026, 3, 22)) == "March 22nd, 2026"

    @pytest.mark.parametrize("value", [None, "", "yesterday", {}, True])
    def test_unparseable_is_not_available(self, value):
        assert format_date_added(value) == "N/A"

    def test_status_badge(self):
        assert status_badge("In Stock") == "secondary"
        assert status_badge("Out of Stock") == "destructive"
