import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.groceries.models import InventoryRecord, Item, StorageLocation
from apps.households.models import Category, CategoryType
from apps.households.services import Actor, create_household


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users and households
# =============================================================================

@pytest.fixture
def grocery_user(db):
    """Create the groceries test user."""
    return User.objects.create_user(
        email='grocery_user@example.com',
        password='TestPass123!',
        display_name='Grocery User',
    )


@pytest.fixture
def grocery_outsider(db):
    """Create a user with a household of their own."""
    return User.objects.create_user(
        email='grocery_outsider@example.com',
        password='TestPass123!',
        display_name='Grocery Outsider',
    )


@pytest.fixture
def grocery_household(grocery_user):
    return create_household(name='Grocery Home', owner=grocery_user)


@pytest.fixture
def grocery_other_household(grocery_outsider):
    return create_household(name='Other Home', owner=grocery_outsider)


@pytest.fixture
def grocery_actor(grocery_user, grocery_household):
    return Actor(user_id=grocery_user.id, household_id=grocery_household.id)


# =============================================================================
# Catalog and stock
# =============================================================================

@pytest.fixture
def grocery_category(grocery_household, grocery_user):
    return Category.objects.create(
        household=grocery_household,
        name='Dairy',
        type=CategoryType.GROCERY,
        created_by=grocery_user,
    )


@pytest.fixture
def grocery_item(grocery_household, grocery_user, grocery_category):
    """Milk, counted in bottles."""
    return Item.objects.create(
        household=grocery_household,
        name='Milk',
        default_unit='bottle',
        default_category=grocery_category,
        perishable=True,
        created_by=grocery_user,
    )


@pytest.fixture
def grocery_spare_item(grocery_household, grocery_user):
    """Item with no stock and no references."""
    return Item.objects.create(
        household=grocery_household,
        name='Flour',
        created_by=grocery_user,
    )


@pytest.fixture
def grocery_other_item(grocery_other_household):
    """Item of another household."""
    return Item.objects.create(household=grocery_other_household, name='Cheese')


@pytest.fixture
def grocery_inventory(grocery_household, grocery_item, grocery_user):
    """Three bottles of milk expiring in three days."""
    return InventoryRecord.objects.create(
        household=grocery_household,
        item=grocery_item,
        quantity=3,
        unit='bottle',
        storage=StorageLocation.FRIDGE,
        expiry_date=timezone.localdate() + timedelta(days=3),
        cost_total=Decimal('4.50'),
        created_by=grocery_user,
        updated_by=grocery_user,
    )


# =============================================================================
# Clients
# =============================================================================

@pytest.fixture
def grocery_client(api_client, grocery_user, grocery_household):
    """Return API client authenticated as the grocery user in their household."""
    refresh = RefreshToken.for_user(grocery_user)
    api_client.credentials(
        HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}',
        HTTP_X_HOUSEHOLD_ID=str(grocery_household.id),
    )
    return api_client
