from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid


class Purchase(models.Model):
    """A shopping trip: header plus ordered lines."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    household = models.ForeignKey(
        'households.Household',
        on_delete=models.CASCADE,
        related_name='purchases'
    )
    vendor = models.CharField(max_length=200, blank=True)
    purchase_date = models.DateTimeField(default=timezone.now)

    # Entered by the user; independent of the line totals
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    paid_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='purchases_paid'
    )
    notes = models.TextField(blank=True)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='purchases_created'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'purchases'
        indexes = [
            models.Index(fields=['household', 'purchase_date'], name='purchase_household_date_idx'),
            models.Index(fields=['paid_by', 'purchase_date'], name='purchase_payer_date_idx'),
        ]
        ordering = ['-purchase_date', '-created_at']

    def __str__(self):
        vendor = self.vendor or 'Unknown vendor'
        return f"{vendor} - {self.total_amount}"


class PurchaseLine(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    purchase = models.ForeignKey(Purchase, on_delete=models.CASCADE, related_name='lines')
    item = models.ForeignKey(
        'groceries.Item',
        on_delete=models.PROTECT,
        related_name='purchase_lines'
    )
    position = models.PositiveIntegerField(default=0)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit = models.CharField(max_length=20, default='unit')
    line_total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))

    class Meta:
        db_table = 'purchase_items'
        ordering = ['position']

    def __str__(self):
        return f"{self.quantity} {self.unit} {self.item.name}"


class ShoppingListEntry(models.Model):
    """
    A free-text item to buy.

    Pending while ``purchased_at`` is null. Promotion links it to the
    purchase and line it became; after that it is read-only.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    household = models.ForeignKey(
        'households.Household',
        on_delete=models.CASCADE,
        related_name='shopping_list'
    )
    item_name = models.CharField(max_length=200)
    added_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='shopping_list_entries'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    purchased_at = models.DateTimeField(null=True, blank=True)
    purchase = models.ForeignKey(
        Purchase,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='shopping_list_entries'
    )
    purchase_line = models.OneToOneField(
        PurchaseLine,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='shopping_list_entry'
    )

    class Meta:
        db_table = 'shopping_list'
        indexes = [
            models.Index(fields=['household', 'purchased_at'], name='shopping_household_status_idx'),
        ]
        ordering = ['created_at']
        verbose_name_plural = 'shopping list entries'

    def __str__(self):
        return self.item_name

    @property
    def is_pending(self):
        return self.purchased_at is None
