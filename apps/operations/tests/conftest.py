import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.audit.models import AuditLogEntry
from apps.bills.models import Bill, BillPayment, BillStatus, Budget, Expense, ExpenseSource
from apps.groceries.models import InventoryRecord, Item, WasteEvent
from apps.households.models import Category, CategoryType, HouseholdMembership, HouseholdRole
from apps.households.services import Actor, create_household
from apps.purchases.models import Purchase, PurchaseLine, ShoppingListEntry


DATA_MODELS = [
    Item,
    Category,
    InventoryRecord,
    Purchase,
    PurchaseLine,
    Bill,
    BillPayment,
    Expense,
    Budget,
    ShoppingListEntry,
    WasteEvent,
]


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def ops_row_counts(db):
    """
    Return a function counting rows per table.

    Used to compare data writes against audit entries and to check
    that failed operations leave nothing behind.
    """
    def counts():
        data = {model._meta.db_table: model.objects.count() for model in DATA_MODELS}
        data['audit_logs'] = AuditLogEntry.objects.count()
        return data
    return counts


@pytest.fixture
def ops_inserted_rows():
    """Return a function giving data rows inserted between two count snapshots."""
    def inserted(before, after):
        return sum(
            after[table] - before[table]
            for table in before
            if table != 'audit_logs'
        )
    return inserted


# =============================================================================
# Users and households
# =============================================================================

@pytest.fixture
def ops_owner(db):
    return User.objects.create_user(
        email='ops_owner@example.com',
        password='TestPass123!',
        display_name='Ops Owner',
    )


@pytest.fixture
def ops_member(db):
    return User.objects.create_user(
        email='ops_member@example.com',
        password='TestPass123!',
        display_name='Ops Member',
    )


@pytest.fixture
def ops_outsider(db):
    return User.objects.create_user(
        email='ops_outsider@example.com',
        password='TestPass123!',
        display_name='Ops Outsider',
    )


@pytest.fixture
def ops_household(ops_owner, ops_member):
    """Household with an owner and a member."""
    home = create_household(name='Ops Home', owner=ops_owner)
    HouseholdMembership.objects.create(
        user=ops_member,
        household=home,
        role=HouseholdRole.MEMBER
    )
    return home


@pytest.fixture
def ops_other_household(ops_outsider):
    return create_household(name='Other Home', owner=ops_outsider)


@pytest.fixture
def ops_actor(ops_owner, ops_household):
    return Actor(user_id=ops_owner.id, household_id=ops_household.id)


@pytest.fixture
def ops_outsider_actor(ops_outsider, ops_household):
    """Outsider pretending to act in the ops household."""
    return Actor(user_id=ops_outsider.id, household_id=ops_household.id)


# =============================================================================
# Catalog, stock and shopping list
# =============================================================================

@pytest.fixture
def ops_food_category(ops_household):
    return Category.objects.create(
        household=ops_household,
        name='Food',
        type=CategoryType.EXPENSE,
    )


@pytest.fixture
def ops_milk(ops_household, ops_owner):
    return Item.objects.create(
        household=ops_household,
        name='Milk',
        default_unit='bottle',
        perishable=True,
        created_by=ops_owner,
    )


@pytest.fixture
def ops_bread(ops_household, ops_owner):
    return Item.objects.create(
        household=ops_household,
        name='Bread',
        default_unit='loaf',
        created_by=ops_owner,
    )


@pytest.fixture
def ops_other_item(ops_other_household):
    return Item.objects.create(household=ops_other_household, name='Cheese')


@pytest.fixture
def ops_milk_stock(ops_household, ops_milk, ops_owner):
    """Three bottles of milk in the fridge."""
    return InventoryRecord.objects.create(
        household=ops_household,
        item=ops_milk,
        quantity=3,
        unit='bottle',
        expiry_date=timezone.localdate() + timedelta(days=5),
        cost_total=Decimal('3.00'),
        created_by=ops_owner,
        updated_by=ops_owner,
    )


@pytest.fixture
def ops_shopping_entries(ops_household, ops_member):
    """Pending entries: Milk and Eggs."""
    milk = ShoppingListEntry.objects.create(
        household=ops_household,
        item_name='Milk',
        added_by=ops_member,
    )
    eggs = ShoppingListEntry.objects.create(
        household=ops_household,
        item_name='Eggs',
        added_by=ops_member,
    )
    return milk, eggs


@pytest.fixture
def ops_purchased_entry(ops_household, ops_member):
    """An entry that was already promoted."""
    return ShoppingListEntry.objects.create(
        household=ops_household,
        item_name='Butter',
        added_by=ops_member,
        purchased_at=timezone.now(),
    )


# =============================================================================
# Bills and budgets
# =============================================================================

@pytest.fixture
def ops_bill(ops_household, ops_owner, ops_food_category):
    """Pending electricity bill."""
    return Bill.objects.create(
        household=ops_household,
        name='Electricity',
        vendor='Power Co',
        amount=Decimal('85.40'),
        due_date=timezone.localdate() + timedelta(days=3),
        category=ops_food_category,
        created_by=ops_owner,
    )


@pytest.fixture
def ops_overdue_bill(ops_household, ops_owner):
    return Bill.objects.create(
        household=ops_household,
        name='Water',
        amount=Decimal('30.00'),
        due_date=timezone.localdate() - timedelta(days=10),
        status=BillStatus.OVERDUE,
        created_by=ops_owner,
    )


@pytest.fixture
def ops_other_bill(ops_other_household):
    return Bill.objects.create(
        household=ops_other_household,
        name='Internet',
        amount=Decimal('40.00'),
        due_date=timezone.localdate(),
    )


@pytest.fixture
def ops_budget(ops_household):
    return Budget.objects.create(
        household=ops_household,
        period='2025-01',
        limit_amount=Decimal('500.00'),
    )


@pytest.fixture
def ops_bill_expense(ops_household, ops_bill):
    """Expense derived from a bill payment."""
    return Expense.objects.create(
        household=ops_household,
        amount=Decimal('85.40'),
        source=ExpenseSource.BILL,
        linked_entity_id=ops_bill.id,
        description='Bill payment for Electricity',
    )
