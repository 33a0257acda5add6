"""
Utility: create a demo client with inventory and a full pricing grid.

Run from repo root:
  python scripts/seed_demo_data.py

Optional env var to override the client username:
  DEMO_USERNAME="acme"
"""

import os
import sys

# Ensure backend project on path
HERE = os.path.dirname(os.path.abspath(__file__))
REPO_ROOT = os.path.abspath(os.path.join(HERE, os.pardir))
BACKEND_DIR = os.path.join(REPO_ROOT, "backend")
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "portal.settings")

import django

django.setup()

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.db import transaction
from django.utils.timezone import now
from inventory.models import InventoryItem

DEMO_ITEMS = [
    # product_name, sku, quantity, inventory_type
    ("Stainless Water Bottle", "SWB-001", 480, ""),
    ("Yoga Mat", "YM-220", 120, "product"),
    ("Phone Case (Assorted)", "PC-MIX", 1500, ""),
    ("Master Carton 18x18x16", "BOX-181816", 40, "box"),
    ("Mixed SKU Pallet", "PAL-001", 3, "pallet"),
    ("40ft Container", "CONT-40", 1, "container"),
]


@transaction.atomic
def ensure_client(username):
    User = get_user_model()
    user, created = User.objects.get_or_create(
        username=username,
        defaults={"name": "Demo Client", "status": "approved", "approved_at": now()},
    )
    if created:
        user.set_password("demo_password")
        user.save(update_fields=["password"])

    for product_name, sku, quantity, inventory_type in DEMO_ITEMS:
        InventoryItem.objects.update_or_create(
            user=user,
            sku=sku,
            defaults={"product_name": product_name, "quantity": quantity, "inventory_type": inventory_type},
        )
    return user, created


def main():
    username = os.environ.get("DEMO_USERNAME", "demo_client")
    user, created = ensure_client(username)
    print(f"{'Created' if created else 'Updated'} demo client {user.username} with {len(DEMO_ITEMS)} inventory items")
    call_command("seed_user_pricing", user.username)


if __name__ == "__main__":
    main()
