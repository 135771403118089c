import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.bills.models import Bill, BillStatus, Budget, Expense
from apps.groceries.models import InventoryRecord, Item, WasteEvent, WasteReason
from apps.households.models import Category, CategoryType, HouseholdMembership, HouseholdRole
from apps.households.services import create_household
from apps.purchases.models import Purchase


def in_january(day, hour=12):
    """Aware datetime on the given day of January 2025."""
    return timezone.make_aware(datetime(2025, 1, day, hour, 0))


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users and households
# =============================================================================

@pytest.fixture
def analytics_owner(db):
    return User.objects.create_user(
        email='analytics_owner@example.com',
        password='TestPass123!',
        display_name='Alice',
    )


@pytest.fixture
def analytics_member(db):
    """Member without a display name; reported by email prefix."""
    return User.objects.create_user(
        email='bob@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def analytics_outsider(db):
    return User.objects.create_user(
        email='analytics_outsider@example.com',
        password='TestPass123!',
        display_name='Outsider',
    )


@pytest.fixture
def analytics_household(analytics_owner, analytics_member):
    home = create_household(name='Report Home', owner=analytics_owner)
    HouseholdMembership.objects.create(
        user=analytics_member,
        household=home,
        role=HouseholdRole.MEMBER
    )
    return home


@pytest.fixture
def analytics_other_household(analytics_outsider):
    return create_household(name='Other Report Home', owner=analytics_outsider)


@pytest.fixture
def food_category(analytics_household):
    return Category.objects.create(
        household=analytics_household,
        name='Food',
        type=CategoryType.EXPENSE,
    )


# =============================================================================
# January 2025 data
# =============================================================================

@pytest.fixture
def january_expenses(analytics_household, analytics_other_household, food_category):
    """
    Food 10.00 and 5.50, an uncategorized 2.00, plus noise outside the
    period and outside the household.
    """
    rows = [
        (analytics_household, in_january(3), Decimal('10.00'), food_category),
        (analytics_household, in_january(20), Decimal('5.50'), food_category),
        (analytics_household, in_january(31, 23), Decimal('2.00'), None),
        (analytics_household, timezone.make_aware(datetime(2025, 2, 1, 0, 30)), Decimal('99.00'), None),
        (analytics_other_household, in_january(10), Decimal('50.00'), None),
    ]
    return [
        Expense.objects.create(household=home, date=when, amount=amount, category=category)
        for home, when, amount, category in rows
    ]


@pytest.fixture
def january_waste(analytics_household, analytics_owner):
    milk = Item.objects.create(household=analytics_household, name='Milk', default_unit='bottle')
    stock = InventoryRecord.objects.create(
        household=analytics_household,
        item=milk,
        quantity=1,
        unit='bottle',
    )
    rows = [
        (2, WasteReason.EXPIRED, in_january(4)),
        (1, WasteReason.EXPIRED, in_january(9)),
        (3, WasteReason.SPOILED, in_january(15)),
        (5, WasteReason.LEFTOVER, timezone.make_aware(datetime(2024, 12, 31, 12, 0))),
    ]
    return [
        WasteEvent.objects.create(
            household=analytics_household,
            inventory_record=stock,
            item=milk,
            quantity=quantity,
            unit='bottle',
            reason=reason,
            event_date=when,
            recorded_by=analytics_owner,
        )
        for quantity, reason, when in rows
    ]


@pytest.fixture
def january_purchases(analytics_household, analytics_owner, analytics_member):
    rows = [
        (analytics_owner, Decimal('12.00'), in_january(2)),
        (analytics_member, Decimal('20.00'), in_january(5)),
        (analytics_owner, Decimal('3.50'), in_january(28)),
        (analytics_member, Decimal('40.00'), timezone.make_aware(datetime(2025, 2, 2, 12, 0))),
    ]
    return [
        Purchase.objects.create(
            household=analytics_household,
            vendor='Market',
            purchase_date=when,
            total_amount=amount,
            paid_by=payer,
            created_by=payer,
        )
        for payer, amount, when in rows
    ]


@pytest.fixture
def january_budget(analytics_household):
    return Budget.objects.create(
        household=analytics_household,
        period='2025-01',
        limit_amount=Decimal('15.00'),
    )


# =============================================================================
# Dashboard data (relative to today)
# =============================================================================

@pytest.fixture
def dashboard_stock(analytics_household):
    """Stock expiring at different distances from today."""
    today = timezone.localdate()
    rows = [
        ('Yogurt', 2, today + timedelta(days=2)),
        ('Cheese', 1, today + timedelta(days=7)),
        ('Ham', 4, today + timedelta(days=8)),
        ('Cream', 1, today - timedelta(days=1)),
        ('Butter', 0, today + timedelta(days=1)),
        ('Rice', 5, None),
    ]
    records = {}
    for name, quantity, expiry in rows:
        item = Item.objects.create(household=analytics_household, name=name)
        records[name] = InventoryRecord.objects.create(
            household=analytics_household,
            item=item,
            quantity=quantity,
            expiry_date=expiry,
        )
    return records


@pytest.fixture
def dashboard_bills(analytics_household, food_category):
    today = timezone.localdate()
    rows = [
        ('Water', today + timedelta(days=3), BillStatus.PENDING),
        ('Gas', today - timedelta(days=2), BillStatus.PENDING),
        ('Phone', today + timedelta(days=30), BillStatus.PENDING),
        ('Power', today + timedelta(days=1), BillStatus.PAID),
    ]
    return {
        name: Bill.objects.create(
            household=analytics_household,
            name=name,
            amount=Decimal('20.00'),
            due_date=due,
            status=bill_status,
            category=food_category,
        )
        for name, due, bill_status in rows
    }


# =============================================================================
# Clients
# =============================================================================

@pytest.fixture
def analytics_client(api_client, analytics_owner, analytics_household):
    """Return API client authenticated as the household owner."""
    refresh = RefreshToken.for_user(analytics_owner)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def analytics_outsider_client(analytics_outsider, analytics_other_household):
    client = APIClient()
    refresh = RefreshToken.for_user(analytics_outsider)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
