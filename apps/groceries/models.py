from django.db import models
from django.utils import timezone
from decimal import Decimal
import uuid


class StorageLocation(models.TextChoices):
    PANTRY = 'pantry', 'Pantry'
    FRIDGE = 'fridge', 'Fridge'
    FREEZER = 'freezer', 'Freezer'
    OTHER = 'other', 'Other'


class WasteReason(models.TextChoices):
    EXPIRED = 'expired', 'Expired'
    SPOILED = 'spoiled', 'Spoiled'
    LEFTOVER = 'leftover', 'Leftover'
    OTHER = 'other', 'Other'


class Item(models.Model):
    """Catalog entry for something the household buys."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    household = models.ForeignKey(
        'households.Household',
        on_delete=models.CASCADE,
        related_name='items'
    )
    name = models.CharField(max_length=200)
    default_unit = models.CharField(max_length=20, default='unit')
    default_category = models.ForeignKey(
        'households.Category',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='items'
    )
    perishable = models.BooleanField(default=False)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_items'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'items'
        indexes = [
            models.Index(fields=['household', 'name'], name='item_household_name_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name


class InventoryRecord(models.Model):
    """
    Stock on hand of one item.

    There is at most one row per (household, item); purchases merge into it.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    household = models.ForeignKey(
        'households.Household',
        on_delete=models.CASCADE,
        related_name='inventory'
    )
    item = models.ForeignKey(Item, on_delete=models.PROTECT, related_name='inventory_records')

    quantity = models.PositiveIntegerField(default=0)
    unit = models.CharField(max_length=20, default='unit')
    storage = models.CharField(
        max_length=20,
        choices=StorageLocation.choices,
        default=StorageLocation.PANTRY
    )
    purchase_date = models.DateField(null=True, blank=True)
    expiry_date = models.DateField(null=True, blank=True)
    cost_total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    notes = models.TextField(blank=True)

    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    updated_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'inventory'
        constraints = [
            models.UniqueConstraint(
                fields=['household', 'item'],
                name='unique_inventory_per_household_item',
            ),
        ]
        indexes = [
            models.Index(fields=['household', 'expiry_date'], name='inventory_expiry_idx'),
        ]
        ordering = ['expiry_date', 'created_at']

    def __str__(self):
        return f"{self.item.name}: {self.quantity} {self.unit}"


class WasteEvent(models.Model):
    """Stock thrown away, with the reason."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    household = models.ForeignKey(
        'households.Household',
        on_delete=models.CASCADE,
        related_name='waste_events'
    )
    inventory_record = models.ForeignKey(
        InventoryRecord,
        on_delete=models.PROTECT,
        related_name='waste_events'
    )
    item = models.ForeignKey(Item, on_delete=models.PROTECT, related_name='waste_events')
    quantity = models.PositiveIntegerField()
    unit = models.CharField(max_length=20, default='unit')
    reason = models.CharField(max_length=20, choices=WasteReason.choices)
    event_date = models.DateTimeField(default=timezone.now)
    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='recorded_waste'
    )

    class Meta:
        db_table = 'waste_events'
        indexes = [
            models.Index(fields=['household', 'event_date'], name='waste_household_date_idx'),
        ]
        ordering = ['-event_date']

    def __str__(self):
        return f"{self.quantity} {self.unit} {self.item.name} ({self.reason})"
