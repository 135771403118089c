import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.bills.models import Bill, Budget, Expense
from apps.households.models import Category, CategoryType
from apps.households.services import create_household


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def bill_payer(db):
    """Create the user who pays the bills."""
    return User.objects.create_user(
        email='bill_payer@example.com',
        password='TestPass123!',
        display_name='Bill Payer',
    )


@pytest.fixture
def bill_household(bill_payer):
    return create_household(name='Bill Home', owner=bill_payer)


@pytest.fixture
def utilities_category(bill_household):
    return Category.objects.create(
        household=bill_household,
        name='Utilities',
        type=CategoryType.EXPENSE,
    )


@pytest.fixture
def pending_bill(bill_household, bill_payer, utilities_category):
    """Internet bill due in five days."""
    return Bill.objects.create(
        household=bill_household,
        name='Internet',
        vendor='Fiber Co',
        amount=Decimal('39.99'),
        due_date=timezone.localdate() + timedelta(days=5),
        category=utilities_category,
        created_by=bill_payer,
    )


@pytest.fixture
def january_expenses(bill_household, utilities_category):
    """Two January expenses and one from February."""
    dates = [
        timezone.make_aware(datetime(2025, 1, 5, 12, 0)),
        timezone.make_aware(datetime(2025, 1, 31, 18, 0)),
        timezone.make_aware(datetime(2025, 2, 1, 9, 0)),
    ]
    return [
        Expense.objects.create(
            household=bill_household,
            date=when,
            amount=Decimal('10.00'),
            category=utilities_category,
        )
        for when in dates
    ]


@pytest.fixture
def january_budget(bill_household):
    return Budget.objects.create(
        household=bill_household,
        period='2025-01',
        limit_amount=Decimal('300.00'),
    )


@pytest.fixture
def bill_client(api_client, bill_payer, bill_household):
    """Return API client authenticated as the bill payer."""
    refresh = RefreshToken.for_user(bill_payer)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
