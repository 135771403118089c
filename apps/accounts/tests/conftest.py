import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.households.services import create_household


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def accounts_user(db):
    """Create a regular test user."""
    return User.objects.create_user(
        email='accounts_user@example.com',
        password='TestPass123!',
        display_name='Accounts User',
    )


@pytest.fixture
def accounts_household(accounts_user):
    """Household owned by the accounts user."""
    return create_household(name='Accounts Home', owner=accounts_user)


@pytest.fixture
def accounts_client(api_client, accounts_user):
    """Return API client authenticated as the accounts user."""
    refresh = RefreshToken.for_user(accounts_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
