from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.db import DatabaseError

from inventory.services import InventorySnapshotItem
from ..dataclasses import ShipmentLine
from ..models import ShipmentRequest, ShipmentRequestLine
from ..services.errors import (
    AuthenticationRequiredError,
    InsufficientStockError,
    ShipmentRequestError,
    SubmissionError,
)
from ..services.submission import submit_shipment_request

pytestmark = pytest.mark.django_db

INVENTORY = [InventorySnapshotItem(id="1", product_name="Widget", quantity=30)]


def _mk_user(status="approved"):
    User = get_user_model()
    return User.objects.create_user(username=f"client-{status}", password="pass", status=status, name="Acme")


def _values(quantity=10, **overrides):
    values = {
        "shipment_type": "product",
        "service": "FBM",
        "product_type": "Standard",
        "date": date(2026, 10, 20),
        "ship_to": "Amazon PHX7",
        "bubble_wrap_feet": 5,
        "shipments": [ShipmentLine(product_id="1", quantity=quantity, pack_of=3, unit_price=Decimal("1.25"))],
    }
    values.update(overrides)
    return values


def test_submit_writes_request_and_lines():
    user = _mk_user()
    shipment_request = submit_shipment_request(_values(), user, INVENTORY, idempotency_key="abc")

    assert shipment_request.user == user
    assert shipment_request.requested_by == user
    assert shipment_request.user_name == "Acme"
    assert shipment_request.status == "pending"
    assert shipment_request.service == "FBM"
    assert shipment_request.additional_services == {"bubble_wrap_feet": 5}
    assert shipment_request.pallet_sub_type is None
    assert shipment_request.idempotency_key == "abc"

    line = ShipmentRequestLine.objects.get(request=shipment_request)
    assert (line.product_id, line.quantity, line.pack_of, line.unit_price) == ("1", 10, 3, Decimal("1.2500"))


def test_insufficient_stock_writes_nothing():
    user = _mk_user()
    with pytest.raises(InsufficientStockError) as excinfo:
        submit_shipment_request(_values(quantity=11), user, INVENTORY)

    assert [str(e) for e in excinfo.value.errors] == ["Widget: Requested 33 units but only 30 available."]
    assert ShipmentRequest.objects.count() == 0


@pytest.mark.parametrize("status", ["pending", "deleted"])
def test_unapproved_account_cannot_submit(status):
    with pytest.raises(AuthenticationRequiredError):
        submit_shipment_request(_values(), _mk_user(status), INVENTORY)
    assert ShipmentRequest.objects.count() == 0


def test_anonymous_cannot_submit():
    with pytest.raises(AuthenticationRequiredError, match="logged in"):
        submit_shipment_request(_values(), AnonymousUser(), INVENTORY)


def test_database_failure_is_wrapped_and_logged():
    user = _mk_user()
    with patch("shipments.services.submission.ShipmentRequest.objects.create", side_effect=DatabaseError("down")), \
            patch("shipments.services.submission.logger") as logger:
        with pytest.raises(SubmissionError) as excinfo:
            submit_shipment_request(_values(), user, INVENTORY)

    assert isinstance(excinfo.value, ShipmentRequestError)
    assert isinstance(excinfo.value.__cause__, DatabaseError)
    assert "Please try again" in str(excinfo.value)
    logger.exception.assert_called_once()
    assert ShipmentRequest.objects.count() == 0
