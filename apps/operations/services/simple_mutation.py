"""
Simple mutation.

Generic create, update and delete of a single household record, audited
like every other write. ``TABLES`` lists what may be written this way and
the rules each table adds on top of its write serializer.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from apps.audit.diffs import snapshot
from apps.bills.models import Bill, BillStatus, Budget, Expense, ExpenseSource
from apps.groceries.models import InventoryRecord, Item
from apps.households.models import Category
from apps.operations.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
)
from apps.operations.serializers import SimpleMutationParamsSerializer as ParamsSerializer
from apps.purchases.models import ShoppingListEntry


# =============================================================================
# Table rules
# =============================================================================

def _budget_rules(unit, action, instance, data):
    if action == 'delete':
        return
    period = data.get('period', instance.period if instance else None)
    clash = Budget.objects.filter(household_id=unit.household_id, period=period)
    if instance is not None:
        clash = clash.exclude(pk=instance.pk)
    if clash.exists():
        raise ConflictError(
            f'A budget for {period} already exists.',
            field='period',
            invariant='budget_period_unique',
        )


def _inventory_rules(unit, action, instance, data):
    if action == 'delete' or 'item_id' not in data:
        return
    clash = InventoryRecord.objects.filter(
        household_id=unit.household_id,
        item_id=data['item_id'],
    )
    if instance is not None:
        clash = clash.exclude(pk=instance.pk)
    if clash.exists():
        raise ConflictError(
            'This item already has an inventory record.',
            field='item_id',
            invariant='inventory_item_unique',
        )


def _category_rules(unit, action, instance, data):
    if action == 'delete':
        return
    name = data.get('name', instance.name if instance else None)
    category_type = data.get('type', instance.type if instance else None)
    clash = Category.objects.filter(
        household_id=unit.household_id,
        name=name,
        type=category_type,
    )
    if instance is not None:
        clash = clash.exclude(pk=instance.pk)
    if clash.exists():
        raise ConflictError(
            f'Category "{name}" already exists.',
            field='name',
            invariant='category_unique',
        )


def _bill_rules(unit, action, instance, data):
    if 'status' not in data:
        return
    current = instance.status if instance else None
    if data['status'] == current:
        return
    if BillStatus.PAID in (data['status'], current):
        raise InvalidStateError(
            'Bills are marked paid only by settling them.',
            field='status',
            invariant='bill_paid_via_settlement',
        )


def _expense_rules(unit, action, instance, data):
    if instance is not None and instance.source == ExpenseSource.BILL:
        raise InvalidStateError(
            'Bill expenses are managed by bill settlement.',
            invariant='bill_expense_derived',
        )


def _shopping_list_rules(unit, action, instance, data):
    if instance is not None and not instance.is_pending:
        raise InvalidStateError(
            'Purchased shopping list entries cannot be changed.',
            invariant='shopping_entry_purchased',
        )


@dataclass(frozen=True)
class TableSpec:
    model: type
    # Write field -> model the referenced id must belong to (same household)
    references: Dict[str, type] = field(default_factory=dict)
    creator_field: Optional[str] = None
    rules: Optional[Callable] = None


TABLES = {
    'items': TableSpec(
        model=Item,
        references={'default_category_id': Category},
        creator_field='created_by_id',
    ),
    'categories': TableSpec(
        model=Category,
        creator_field='created_by_id',
        rules=_category_rules,
    ),
    'inventory': TableSpec(
        model=InventoryRecord,
        references={'item_id': Item},
        creator_field='created_by_id',
        rules=_inventory_rules,
    ),
    'bills': TableSpec(
        model=Bill,
        references={'category_id': Category},
        creator_field='created_by_id',
        rules=_bill_rules,
    ),
    'budgets': TableSpec(
        model=Budget,
        rules=_budget_rules,
    ),
    'expenses': TableSpec(
        model=Expense,
        references={'category_id': Category},
        rules=_expense_rules,
    ),
    'shopping_list': TableSpec(
        model=ShoppingListEntry,
        creator_field='added_by_id',
        rules=_shopping_list_rules,
    ),
}


# =============================================================================
# Handler
# =============================================================================

def run(unit, params):
    table = params['table']
    target = TABLES[table]
    action = params['action']
    data = params['data']

    if action == 'create':
        return _create(unit, table, target, data)

    instance = (
        target.model.objects
        .select_for_update()
        .filter(pk=params['record_id'], household_id=unit.household_id)
        .first()
    )
    if instance is None:
        raise NotFoundError('Record not found.', field='record_id')

    if action == 'update':
        return _update(unit, table, target, instance, data)
    return _delete(unit, table, target, instance)


def _create(unit, table, target, data):
    _check_references(unit, target, data)
    if target.rules:
        target.rules(unit, 'create', None, data)

    instance = target.model(household_id=unit.household_id, **data)
    if target.creator_field:
        setattr(instance, target.creator_field, unit.user_id)
    if table == 'inventory':
        instance.updated_by_id = unit.user_id

    _save(instance, force_insert=True)
    unit.created(instance)
    return instance


def _update(unit, table, target, instance, data):
    _check_references(unit, target, data)
    if target.rules:
        target.rules(unit, 'update', instance, data)

    before = snapshot(instance)
    for name, value in data.items():
        setattr(instance, name, value)
    if table == 'inventory':
        instance.updated_by_id = unit.user_id

    _save(instance)
    unit.updated(instance, before)
    return instance


def _delete(unit, table, target, instance):
    if target.rules:
        target.rules(unit, 'delete', instance, {})

    before = snapshot(instance)
    record_id = instance.pk
    try:
        with transaction.atomic():
            instance.delete()
    except ProtectedError:
        raise ConflictError(
            'The record is still referenced by other records.',
            invariant='item_referenced' if table == 'items' else 'record_referenced',
        )
    unit.deleted(table, record_id, before)
    return None


def _check_references(unit, target, data):
    for name, model in target.references.items():
        value = data.get(name)
        if value and not model.objects.filter(pk=value, household_id=unit.household_id).exists():
            raise NotFoundError(f'{model._meta.verbose_name.capitalize()} not found.', field=name)


def _save(instance, **kwargs):
    """Save inside a savepoint; a constraint violation becomes ConflictError."""
    try:
        with transaction.atomic():
            instance.save(**kwargs)
    except IntegrityError:
        raise ConflictError('The change conflicts with existing data.')
