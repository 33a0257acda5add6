# backend/pricing/management/commands/seed_user_pricing.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils.timezone import now

from pricing.models import (
    BoxForwardingPrice,
    PalletExistingInventoryPrice,
    PalletForwardingPrice,
    PrepPricingRule,
)
from pricing.services.brackets import get_brackets

# Per-unit starting rates by package; Large items cost a fixed premium on top
DEFAULT_RATES = {
    "Starter": Decimal("1.25"),
    "Standard": Decimal("1.00"),
    "Small Business": Decimal("0.85"),
    "Premium": Decimal("0.70"),
}
LARGE_PREMIUM = Decimal("0.50")
DEFAULT_PACK_SURCHARGE = Decimal("0.25")


def upsert_rule(user, service, product_type, bracket, rate, pack_of):
    rule, created = PrepPricingRule.objects.update_or_create(
        user=user,
        service=service,
        product_type=product_type,
        quantity_range=bracket.label,
        defaults={
            "package": bracket.package,
            "rate": rate,
            "pack_of": pack_of,
            "updated_at": now(),
        },
    )
    return rule, created


class Command(BaseCommand):
    help = "Seeds a client's prep pricing grid plus box and pallet forwarding prices."

    def add_arguments(self, parser):
        parser.add_argument("username")
        parser.add_argument("--box-price", default="5.00")
        parser.add_argument("--pallet-forwarding-price", default="45.00")
        parser.add_argument("--pallet-existing-price", default="35.00")
        parser.add_argument("--pack-surcharge", default=str(DEFAULT_PACK_SURCHARGE))

    @transaction.atomic
    def handle(self, *args, **options):
        User = get_user_model()
        try:
            user = User.objects.get(username=options["username"])
        except User.DoesNotExist:
            raise CommandError(f"No user named {options['username']!r}")

        pack_surcharge = Decimal(options["pack_surcharge"])
        self.stdout.write(self.style.WARNING(f"Seeding pricing for {user.username}..."))

        created_count = 0
        for service, brackets in get_brackets().items():
            for bracket in brackets:
                base = DEFAULT_RATES.get(bracket.package, DEFAULT_RATES["Standard"])
                for product_type, rate in (("Standard", base), ("Large", base + LARGE_PREMIUM)):
                    _, created = upsert_rule(user, service, product_type, bracket, rate, pack_surcharge)
                    created_count += int(created)
        self.stdout.write(f"Prep rules: {created_count} created")

        stamp = now()
        BoxForwardingPrice.objects.create(user=user, price=Decimal(options["box_price"]), updated_at=stamp)
        PalletForwardingPrice.objects.create(user=user, price=Decimal(options["pallet_forwarding_price"]), updated_at=stamp)
        PalletExistingInventoryPrice.objects.create(user=user, price=Decimal(options["pallet_existing_price"]), updated_at=stamp)

        self.stdout.write(self.style.SUCCESS(f"Pricing seeded for {user.username}."))
