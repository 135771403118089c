# Generated manually for the household manager

import uuid
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('households', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Item',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('default_unit', models.CharField(default='unit', max_length=20)),
                ('perishable', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_items', to=settings.AUTH_USER_MODEL)),
                ('default_category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='items', to='households.category')),
                ('household', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='households.household')),
            ],
            options={
                'db_table': 'items',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['household', 'name'], name='item_household_name_idx')],
            },
        ),
        migrations.CreateModel(
            name='InventoryRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('quantity', models.PositiveIntegerField(default=0)),
                ('unit', models.CharField(default='unit', max_length=20)),
                ('storage', models.CharField(choices=[('pantry', 'Pantry'), ('fridge', 'Fridge'), ('freezer', 'Freezer'), ('other', 'Other')], default='pantry', max_length=20)),
                ('purchase_date', models.DateField(blank=True, null=True)),
                ('expiry_date', models.DateField(blank=True, null=True)),
                ('cost_total', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('household', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='inventory', to='households.household')),
                ('item', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='inventory_records', to='groceries.item')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'inventory',
                'ordering': ['expiry_date', 'created_at'],
                'indexes': [models.Index(fields=['household', 'expiry_date'], name='inventory_expiry_idx')],
                'constraints': [models.UniqueConstraint(fields=('household', 'item'), name='unique_inventory_per_household_item')],
            },
        ),
        migrations.CreateModel(
            name='WasteEvent',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('quantity', models.PositiveIntegerField()),
                ('unit', models.CharField(default='unit', max_length=20)),
                ('reason', models.CharField(choices=[('expired', 'Expired'), ('spoiled', 'Spoiled'), ('leftover', 'Leftover'), ('other', 'Other')], max_length=20)),
                ('event_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('household', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='waste_events', to='households.household')),
                ('inventory_record', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='waste_events', to='groceries.inventoryrecord')),
                ('item', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='waste_events', to='groceries.item')),
                ('recorded_by', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='recorded_waste', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'waste_events',
                'ordering': ['-event_date'],
                'indexes': [models.Index(fields=['household', 'event_date'], name='waste_household_date_idx')],
            },
        ),
    ]
