from decimal import Decimal

import pytest

from pricing.dataclasses import DatedPrice, PricingContext, PricingRule, PricingTables
from ..dataclasses import ShipmentLine
from ..services.lines import toggle_line

BOX = PricingContext("box")
PRODUCT = PricingContext("product", service="FBM", product_type="Standard")


def _tables(loading=False):
    return PricingTables(
        prep_rules=[PricingRule(service="FBM", product_type="Standard", quantity_range="<25",
                                rate=Decimal("1.25"), package="Starter")],
        box_forwarding=[DatedPrice(price="6.50", updated_at="2026-01-01")],
        loading=loading,
    )


def test_select_appends_priced_line():
    lines = []
    result = toggle_line(lines, "42", True, BOX, _tables())
    assert lines == []
    assert len(result) == 1
    line = result[0]
    assert (line.product_id, line.quantity, line.pack_of) == ("42", 1, 1)
    assert line.unit_price == Decimal("6.50")
    assert line.total_price == Decimal("6.50")
    assert line.priced_for == "box"


def test_select_product_uses_prep_grid():
    result = toggle_line([], 7, True, PRODUCT, _tables())
    assert result[0].product_id == "7"
    assert result[0].total_price == Decimal("1.25")


def test_select_while_loading_leaves_price_unset():
    result = toggle_line([], "42", True, BOX, _tables(loading=True))
    assert result[0].unit_price == Decimal("0")
    assert result[0].priced_for is None


def test_deselect_removes_line():
    lines = [ShipmentLine(product_id="1"), ShipmentLine(product_id="2")]
    result = toggle_line(lines, "1", False, BOX, _tables())
    assert [line.product_id for line in result] == ["2"]
    assert len(lines) == 2


@pytest.mark.parametrize("product_id,selected", [("1", True), ("9", False)])
def test_noop_combinations(product_id, selected):
    lines = [ShipmentLine(product_id="1", quantity=3)]
    result = toggle_line(lines, product_id, selected, BOX, _tables())
    assert result == lines
    assert result is not lines


def test_empty_product_id_is_rejected():
    with pytest.raises(ValueError):
        toggle_line([], "", True, BOX, _tables())
