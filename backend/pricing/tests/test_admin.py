from datetime import timedelta
from decimal import Decimal

import pytest
from django.urls import reverse
from django.utils import timezone

from ..models import BoxForwardingPrice, PrepPricingRule

pytestmark = pytest.mark.django_db


@pytest.mark.parametrize("model_path", [
    "pricing/preppricingrule",
    "pricing/boxforwardingprice",
    "pricing/palletforwardingprice",
    "pricing/palletexistinginventoryprice",
    "inventory/inventoryitem",
    "shipments/shipmentrequest",
    "accounts/customuser",
])
def test_changelists_render(admin_client, model_path):
    resp = admin_client.get(f"/admin/{model_path}/")
    assert resp.status_code == 200


def test_validate_ranges_action_flags_unknown_labels(admin_client, admin_user):
    good = PrepPricingRule.objects.create(user=admin_user, service="FBM", product_type="Standard",
                                          quantity_range="25+", rate=Decimal("1.00"))
    bad = PrepPricingRule.objects.create(user=admin_user, service="FBM", product_type="Standard",
                                         quantity_range="10-20", rate=Decimal("1.00"))

    resp = admin_client.post(
        reverse("admin:pricing_preppricingrule_changelist"),
        {"action": "validate_ranges", "_selected_action": [good.pk, bad.pk]},
        follow=True,
    )
    messages = [str(m) for m in resp.context["messages"]]
    assert messages == [f"Rule {bad.pk}: unknown quantity range '10-20' for FBM"]


def test_admin_edit_becomes_newest_price(admin_client, admin_user):
    stale = timezone.now() - timedelta(days=30)
    price = BoxForwardingPrice.objects.create(user=admin_user, price=Decimal("5.00"), updated_at=stale)

    resp = admin_client.post(
        reverse("admin:pricing_boxforwardingprice_change", args=[price.pk]),
        {"user": admin_user.pk, "price": "6.00", "created_at_0": "2026-01-01", "created_at_1": "00:00:00",
         "updated_at_0": "2026-01-01", "updated_at_1": "00:00:00"},
    )
    assert resp.status_code == 302
    price.refresh_from_db()
    assert price.price == Decimal("6.00")
    assert price.updated_at > stale
