import pytest
from django.db import transaction
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.audit.diffs import Created
from apps.audit.services import record
from apps.households.models import Category, CategoryType
from apps.households.services import Actor, create_household


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def audit_user(db):
    """Create the audit test user."""
    return User.objects.create_user(
        email='audit_user@example.com',
        password='TestPass123!',
        display_name='Audit User',
    )


@pytest.fixture
def audit_other_user(db):
    """Create a user of another household."""
    return User.objects.create_user(
        email='audit_other@example.com',
        password='TestPass123!',
        display_name='Audit Other',
    )


@pytest.fixture
def audit_household(audit_user):
    return create_household(name='Audit Home', owner=audit_user)


@pytest.fixture
def audit_other_household(audit_other_user):
    return create_household(name='Other Home', owner=audit_other_user)


@pytest.fixture
def audit_actor(audit_user, audit_household):
    return Actor(user_id=audit_user.id, household_id=audit_household.id)


@pytest.fixture
def audit_category(audit_household, audit_user):
    """A category to write audit entries about."""
    return Category.objects.create(
        household=audit_household,
        name='Dairy',
        type=CategoryType.GROCERY,
        created_by=audit_user,
    )


@pytest.fixture
def audit_entry(audit_household, audit_user, audit_category):
    """One committed create entry for the audit category."""
    with transaction.atomic():
        return record(
            household_id=audit_household.id,
            actor_id=audit_user.id,
            table='categories',
            record_id=audit_category.id,
            diff=Created({'id': str(audit_category.id), 'name': 'Dairy'}),
        )


@pytest.fixture
def audit_other_entry(audit_other_household, audit_other_user):
    """An entry that belongs to another household."""
    category = Category.objects.create(
        household=audit_other_household,
        name='Other',
        type=CategoryType.EXPENSE,
    )
    with transaction.atomic():
        return record(
            household_id=audit_other_household.id,
            actor_id=audit_other_user.id,
            table='categories',
            record_id=category.id,
            diff=Created({'id': str(category.id), 'name': 'Other'}),
        )


@pytest.fixture
def audit_client(api_client, audit_user):
    """Return API client authenticated as the audit user."""
    refresh = RefreshToken.for_user(audit_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
