import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


def _dated_price_fields(related_name):
    return [
        ('id', models.BigAutoField(primary_key=True, serialize=False)),
        ('price', models.DecimalField(decimal_places=2, max_digits=12)),
        ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
        ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
        ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name=related_name, to=settings.AUTH_USER_MODEL)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='PrepPricingRule',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('service', models.CharField(choices=[('FBA/WFS/TFS', 'FBA/WFS/TFS'), ('FBM', 'FBM')], max_length=16)),
                ('product_type', models.CharField(choices=[('Standard', 'Standard'), ('Large', 'Large'), ('Custom', 'Custom')], max_length=16)),
                ('package', models.CharField(blank=True, choices=[('Starter', 'Starter'), ('Standard', 'Standard'), ('Small Business', 'Small Business'), ('Premium', 'Premium')], max_length=32, null=True)),
                ('quantity_range', models.CharField(max_length=16)),
                ('rate', models.DecimalField(decimal_places=4, max_digits=12)),
                ('pack_of', models.DecimalField(decimal_places=4, default=0, max_digits=12)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='prep_pricing_rules', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'prep_pricing_rules',
                'indexes': [models.Index(fields=['user', 'service', 'product_type'], name='prep_rules_user_svc_idx')],
            },
        ),
        migrations.CreateModel(
            name='BoxForwardingPrice',
            fields=_dated_price_fields('box_forwarding_prices'),
            options={'db_table': 'box_forwarding_prices'},
        ),
        migrations.CreateModel(
            name='PalletForwardingPrice',
            fields=_dated_price_fields('pallet_forwarding_prices'),
            options={'db_table': 'pallet_forwarding_prices'},
        ),
        migrations.CreateModel(
            name='PalletExistingInventoryPrice',
            fields=_dated_price_fields('pallet_existing_inventory_prices'),
            options={'db_table': 'pallet_existing_inventory_prices'},
        ),
    ]
