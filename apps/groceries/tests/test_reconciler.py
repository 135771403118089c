"""
Inventory reconciler tests.

Tests cover:
- Insert of a new stock row and increment of an existing one
- Input validation
- Concurrent increments (no lost updates)
"""

import pytest
import threading
from decimal import Decimal
from django.db import connection, transaction
from django.test import TransactionTestCase

from apps.audit.diffs import Created, Updated
from apps.groceries.models import InventoryRecord, Item
from apps.groceries.services import reconcile
from apps.operations.exceptions import NotFoundError, ValidationError


@pytest.mark.django_db
class TestReconcile:

    def test_creates_row_when_absent(self, grocery_household, grocery_item, grocery_user):
        result = reconcile(
            household_id=grocery_household.id,
            item_id=grocery_item.id,
            delta_quantity=2,
            actor_id=grocery_user.id,
            cost_delta=Decimal('3.00'),
        )

        record = result.record
        assert isinstance(result.diff, Created)
        assert record.quantity == 2
        assert record.unit == 'bottle'
        assert record.cost_total == Decimal('3.00')
        assert record.created_by_id == grocery_user.id
        assert result.diff.record['id'] == str(record.id)

    def test_explicit_unit_for_new_row(self, grocery_household, grocery_item, grocery_user):
        result = reconcile(
            household_id=grocery_household.id,
            item_id=grocery_item.id,
            delta_quantity=1,
            actor_id=grocery_user.id,
            unit='carton',
        )

        assert result.record.unit == 'carton'

    def test_increments_existing_row(self, grocery_household, grocery_item, grocery_user, grocery_inventory):
        result = reconcile(
            household_id=grocery_household.id,
            item_id=grocery_item.id,
            delta_quantity=2,
            actor_id=grocery_user.id,
            cost_delta=Decimal('3.00'),
        )

        assert result.record.pk == grocery_inventory.pk
        assert result.record.quantity == 5
        assert result.record.cost_total == Decimal('7.50')
        assert isinstance(result.diff, Updated)
        assert result.diff.old['quantity'] == 3
        assert result.diff.new['quantity'] == 5
        assert InventoryRecord.objects.filter(item=grocery_item).count() == 1

    def test_increment_keeps_unit_and_expiry(self, grocery_household, grocery_item, grocery_user, grocery_inventory):
        """Only quantity and cost change on an existing row."""
        result = reconcile(
            household_id=grocery_household.id,
            item_id=grocery_item.id,
            delta_quantity=1,
            actor_id=grocery_user.id,
            unit='carton',
        )

        assert result.record.unit == 'bottle'
        assert result.record.expiry_date == grocery_inventory.expiry_date

    @pytest.mark.parametrize('delta', [0, -1])
    def test_rejects_non_positive_delta(self, grocery_household, grocery_item, grocery_user, delta):
        with pytest.raises(ValidationError) as exc_info:
            reconcile(
                household_id=grocery_household.id,
                item_id=grocery_item.id,
                delta_quantity=delta,
                actor_id=grocery_user.id,
            )

        assert exc_info.value.field == 'quantity'
        assert not InventoryRecord.objects.exists()

    def test_item_of_other_household(self, grocery_household, grocery_other_item, grocery_user):
        with pytest.raises(NotFoundError) as exc_info:
            reconcile(
                household_id=grocery_household.id,
                item_id=grocery_other_item.id,
                delta_quantity=1,
                actor_id=grocery_user.id,
            )

        assert exc_info.value.field == 'item_id'


class TestConcurrentReconcile(TransactionTestCase):
    """
    Concurrent increments against a real database.

    TransactionTestCase is required here: every thread commits its own
    transaction on its own connection.
    """

    def setUp(self):
        from apps.accounts.models import User
        from apps.households.services import create_household

        self.user = User.objects.create_user(
            email='stock@test.com',
            password='TestPass123!',
            display_name='Stock',
        )
        self.household = create_household(name='Stock Home', owner=self.user)
        self.item = Item.objects.create(household=self.household, name='Rice')

    def _run_threads(self, deltas):
        errors = []

        def add_stock(delta):
            try:
                with transaction.atomic():
                    reconcile(
                        household_id=self.household.id,
                        item_id=self.item.id,
                        delta_quantity=delta,
                        actor_id=self.user.id,
                    )
            except Exception as e:
                errors.append(f"Unexpected error: {e}")
            finally:
                connection.close()

        threads = [threading.Thread(target=add_stock, args=(delta,)) for delta in deltas]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return errors

    def test_concurrent_first_inserts_create_one_row(self):
        """Racing inserts for a new item end in one row holding the full sum."""
        deltas = [1, 2, 3, 4, 5, 6, 7, 8]

        errors = self._run_threads(deltas)

        assert errors == []
        records = InventoryRecord.objects.filter(household=self.household, item=self.item)
        assert records.count() == 1
        assert records.get().quantity == sum(deltas)

    def test_concurrent_increments_no_lost_updates(self):
        InventoryRecord.objects.create(household=self.household, item=self.item, quantity=10)
        deltas = [1] * 10

        errors = self._run_threads(deltas)

        assert errors == []
        record = InventoryRecord.objects.get(household=self.household, item=self.item)
        assert record.quantity == 10 + sum(deltas)
