from django.db import models
from django.core.validators import MinValueValidator, RegexValidator
from django.utils import timezone
from decimal import Decimal
import uuid


class BillStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    PAID = 'paid', 'Paid'
    OVERDUE = 'overdue', 'Overdue'


class ExpenseSource(models.TextChoices):
    PURCHASE = 'purchase', 'Purchase'
    BILL = 'bill', 'Bill'
    OTHER = 'other', 'Other'


period_validator = RegexValidator(
    regex=r'^\d{4}-(0[1-9]|1[0-2])$',
    message='Period must be in YYYY-MM format.'
)


class Bill(models.Model):
    """A recurring or one-off bill the household has to pay."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    household = models.ForeignKey(
        'households.Household',
        on_delete=models.CASCADE,
        related_name='bills'
    )
    name = models.CharField(max_length=200)
    vendor = models.CharField(max_length=200, blank=True)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    due_date = models.DateField()
    status = models.CharField(
        max_length=20,
        choices=BillStatus.choices,
        default=BillStatus.PENDING
    )
    recurring_rule = models.CharField(max_length=100, blank=True)
    category = models.ForeignKey(
        'households.Category',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='bills'
    )
    notes = models.TextField(blank=True)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_bills'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'bills'
        indexes = [
            models.Index(fields=['household', 'status', 'due_date'], name='bill_household_due_idx'),
        ]
        ordering = ['due_date']

    def __str__(self):
        return f"{self.name} - {self.amount} ({self.status})"


class BillPayment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    bill = models.ForeignKey(Bill, on_delete=models.PROTECT, related_name='payments')
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    paid_on = models.DateTimeField(default=timezone.now)
    paid_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='bill_payments'
    )
    method = models.CharField(max_length=50, blank=True)
    notes = models.TextField(blank=True)

    class Meta:
        db_table = 'bill_payments'
        ordering = ['-paid_on']

    def __str__(self):
        return f"{self.bill.name}: {self.amount}"


class Expense(models.Model):
    """
    Money spent by the household.

    Rows with source=bill are derived from bill payments and are not
    edited directly.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    household = models.ForeignKey(
        'households.Household',
        on_delete=models.CASCADE,
        related_name='expenses'
    )
    date = models.DateTimeField(default=timezone.now)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    category = models.ForeignKey(
        'households.Category',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='expenses'
    )
    description = models.CharField(max_length=255, blank=True)
    source = models.CharField(
        max_length=20,
        choices=ExpenseSource.choices,
        default=ExpenseSource.OTHER
    )
    linked_entity_id = models.UUIDField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['household', 'date'], name='expense_household_date_idx'),
            models.Index(fields=['source', 'linked_entity_id'], name='expense_link_idx'),
        ]
        ordering = ['-date']

    def __str__(self):
        return f"{self.description or self.source}: {self.amount}"


class Budget(models.Model):
    """Spending limit for one calendar month."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    household = models.ForeignKey(
        'households.Household',
        on_delete=models.CASCADE,
        related_name='budgets'
    )
    period = models.CharField(max_length=7, validators=[period_validator])
    limit_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'budgets'
        constraints = [
            models.UniqueConstraint(
                fields=['household', 'period'],
                name='unique_budget_per_household_period',
            ),
        ]
        ordering = ['-period']

    def __str__(self):
        return f"{self.period}: {self.limit_amount}"
