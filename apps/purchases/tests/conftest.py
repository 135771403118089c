import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.groceries.models import Item
from apps.households.models import HouseholdMembership, HouseholdRole
from apps.households.services import create_household
from apps.purchases.models import Purchase, ShoppingListEntry


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users and households
# =============================================================================

@pytest.fixture
def buyer(db):
    """Create the user who records purchases."""
    return User.objects.create_user(
        email='buyer@example.com',
        password='TestPass123!',
        display_name='Buyer User',
    )


@pytest.fixture
def buyer_partner(db):
    """Create another member of the buyer's household."""
    return User.objects.create_user(
        email='partner@example.com',
        password='TestPass123!',
        display_name='Partner User',
    )


@pytest.fixture
def purchase_outsider(db):
    """Create a user outside the household."""
    return User.objects.create_user(
        email='purchase_outsider@example.com',
        password='TestPass123!',
        display_name='Outsider',
    )


@pytest.fixture
def purchase_household(buyer, buyer_partner):
    home = create_household(name='Purchase Home', owner=buyer)
    HouseholdMembership.objects.create(
        user=buyer_partner,
        household=home,
        role=HouseholdRole.MEMBER
    )
    return home


@pytest.fixture
def outsider_household(purchase_outsider):
    return create_household(name='Outsider Home', owner=purchase_outsider)


# =============================================================================
# Data
# =============================================================================

@pytest.fixture
def purchase_item(purchase_household, buyer):
    return Item.objects.create(
        household=purchase_household,
        name='Coffee',
        default_unit='bag',
        created_by=buyer,
    )


@pytest.fixture
def existing_purchase(purchase_household, buyer):
    """A purchase made last week, without lines."""
    return Purchase.objects.create(
        household=purchase_household,
        vendor='Market',
        purchase_date=timezone.now() - timedelta(days=7),
        total_amount=Decimal('15.00'),
        paid_by=buyer,
        created_by=buyer,
    )


@pytest.fixture
def partner_purchase(purchase_household, buyer_partner):
    """A purchase paid by the partner today."""
    return Purchase.objects.create(
        household=purchase_household,
        vendor='Bakery',
        total_amount=Decimal('4.00'),
        paid_by=buyer_partner,
        created_by=buyer_partner,
    )


@pytest.fixture
def outsider_purchase(outsider_household, purchase_outsider):
    return Purchase.objects.create(
        household=outsider_household,
        vendor='Elsewhere',
        total_amount=Decimal('99.00'),
        paid_by=purchase_outsider,
        created_by=purchase_outsider,
    )


@pytest.fixture
def pending_entries(purchase_household, buyer_partner):
    """Milk and Eggs on the shopping list."""
    return [
        ShoppingListEntry.objects.create(
            household=purchase_household,
            item_name=name,
            added_by=buyer_partner,
        )
        for name in ('Milk', 'Eggs')
    ]


# =============================================================================
# Clients
# =============================================================================

@pytest.fixture
def buyer_client(api_client, buyer, purchase_household):
    """Return API client authenticated as the buyer."""
    refresh = RefreshToken.for_user(buyer)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def outsider_client(purchase_outsider, outsider_household):
    """Return API client authenticated as the outsider."""
    client = APIClient()
    refresh = RefreshToken.for_user(purchase_outsider)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
