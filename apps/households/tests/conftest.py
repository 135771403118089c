import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.households.models import HouseholdMembership, HouseholdRole
from apps.households.services import create_household


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def household_owner(db):
    """Create a household owner."""
    return User.objects.create_user(
        email='household_owner@example.com',
        password='TestPass123!',
        display_name='Household Owner',
    )


@pytest.fixture
def household_member(db):
    """Create a regular household member."""
    return User.objects.create_user(
        email='household_member@example.com',
        password='TestPass123!',
        display_name='Household Member',
    )


@pytest.fixture
def household_outsider(db):
    """Create a user who belongs to no household."""
    return User.objects.create_user(
        email='household_outsider@example.com',
        password='TestPass123!',
        display_name='Household Outsider',
    )


# =============================================================================
# Households
# =============================================================================

@pytest.fixture
def household(household_owner, household_member):
    """Household with an owner and one member."""
    home = create_household(name='Test Home', owner=household_owner)
    HouseholdMembership.objects.create(
        user=household_member,
        household=home,
        role=HouseholdRole.MEMBER
    )
    return home


@pytest.fixture
def second_household(household, household_owner):
    """Another household of the same owner, created later."""
    return create_household(name='Holiday Home', owner=household_owner)


# =============================================================================
# Clients
# =============================================================================

@pytest.fixture
def household_owner_client(api_client, household_owner):
    """Return API client authenticated as the owner."""
    refresh = RefreshToken.for_user(household_owner)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def household_member_client(household_member):
    """Return API client authenticated as the member."""
    client = APIClient()
    refresh = RefreshToken.for_user(household_member)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def household_outsider_client(household_outsider):
    """Return API client authenticated as the outsider."""
    client = APIClient()
    refresh = RefreshToken.for_user(household_outsider)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
