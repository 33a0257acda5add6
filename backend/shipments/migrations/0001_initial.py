import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ShipmentRequest',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_name', models.CharField(blank=True, max_length=255)),
                ('date', models.DateField()),
                ('ship_to', models.CharField(blank=True, max_length=255)),
                ('shipment_type', models.CharField(choices=[('product', 'product'), ('box', 'box'), ('pallet', 'pallet')], max_length=16)),
                ('service', models.CharField(blank=True, max_length=32, null=True)),
                ('pallet_sub_type', models.CharField(blank=True, choices=[('existing_inventory', 'existing_inventory'), ('forwarding', 'forwarding')], max_length=32, null=True)),
                ('product_type', models.CharField(blank=True, choices=[('Standard', 'Standard'), ('Large', 'Large'), ('Custom', 'Custom')], max_length=16, null=True)),
                ('custom_dimensions', models.CharField(blank=True, max_length=255, null=True)),
                ('remarks', models.TextField(blank=True, null=True)),
                ('label_url', models.URLField(blank=True, default='', max_length=500)),
                ('additional_services', models.JSONField(blank=True, null=True)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed'), ('shipped', 'Shipped'), ('cancelled', 'Cancelled')], default='pending', max_length=20)),
                ('requested_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('idempotency_key', models.CharField(blank=True, max_length=64, null=True)),
                ('requested_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='shipment_requests', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'shipment_requests',
                'ordering': ['-requested_at'],
                'indexes': [models.Index(fields=['user', '-requested_at'], name='shipreq_user_requested_idx')],
                'constraints': [models.UniqueConstraint(fields=('user', 'idempotency_key'), name='shipreq_user_idem_uniq')],
            },
        ),
        migrations.CreateModel(
            name='ShipmentRequestLine',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_id', models.CharField(max_length=64)),
                ('quantity', models.PositiveIntegerField()),
                ('pack_of', models.PositiveIntegerField(default=1)),
                ('unit_price', models.DecimalField(decimal_places=4, default=0, max_digits=12)),
                ('selected_additional_services', models.JSONField(blank=True, null=True)),
                ('request', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='shipments', to='shipments.shipmentrequest')),
            ],
            options={
                'db_table': 'shipment_request_lines',
                'ordering': ['id'],
            },
        ),
    ]
