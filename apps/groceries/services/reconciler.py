"""
Inventory reconciler.

Merges incoming quantities into the single stock row each household keeps
per item. The merge is an atomic insert-or-increment:

1. Lock the existing (household, item) row with ``select_for_update``.
2. If it exists, increment it with ``F()`` expressions in the database.
3. If not, insert it inside a savepoint. When a concurrent transaction
   inserted the same row first, the unique constraint rejects ours and we
   fall back to the locked increment.

The reconciler does not write audit entries. It returns the diff and the
calling unit of work records it in the same transaction.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

import structlog
from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from apps.audit.diffs import Created, Updated, snapshot
from apps.groceries.models import InventoryRecord, Item
from apps.operations.exceptions import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Reconciliation:
    record: InventoryRecord
    diff: Union[Created, Updated]


def reconcile(
    *,
    household_id: UUID,
    item_id: UUID,
    delta_quantity: int,
    actor_id: UUID,
    unit: Optional[str] = None,
    cost_delta: Optional[Decimal] = None
) -> Reconciliation:
    """
    Add ``delta_quantity`` of an item to the household's stock.

    Must run inside the caller's transaction.

    Args:
        household_id: Household owning the stock
        item_id: Catalog item being stocked
        delta_quantity: Quantity to add, at least 1
        actor_id: User performing the change
        unit: Unit for a newly created row (defaults to the item's unit)
        cost_delta: Amount added to the row's accumulated cost

    Returns:
        Reconciliation with the refreshed record and its Created/Updated diff

    Raises:
        ValidationError: If delta_quantity is below 1
        NotFoundError: If the item is not in this household
    """
    if delta_quantity is None or delta_quantity < 1:
        raise ValidationError('Quantity must be at least 1.', field='quantity')

    if not Item.objects.filter(id=item_id, household_id=household_id).exists():
        raise NotFoundError('Item not found.', field='item_id')

    cost_delta = cost_delta if cost_delta is not None else Decimal('0.00')

    existing = _locked_row(household_id, item_id)
    if existing is None:
        item = Item.objects.get(id=item_id)
        try:
            with transaction.atomic():
                record = InventoryRecord.objects.create(
                    household_id=household_id,
                    item_id=item_id,
                    quantity=delta_quantity,
                    unit=unit or item.default_unit,
                    purchase_date=timezone.localdate(),
                    cost_total=cost_delta,
                    created_by_id=actor_id,
                    updated_by_id=actor_id,
                )
        except IntegrityError:
            # Lost the insert race; the winner's row now exists.
            existing = _locked_row(household_id, item_id)
        else:
            record.refresh_from_db()
            logger.info(
                'inventory_created',
                household_id=str(household_id),
                item_id=str(item_id),
                quantity=delta_quantity,
            )
            return Reconciliation(record=record, diff=Created(snapshot(record)))

    before = snapshot(existing)
    InventoryRecord.objects.filter(pk=existing.pk).update(
        quantity=F('quantity') + delta_quantity,
        cost_total=F('cost_total') + cost_delta,
        updated_by_id=actor_id,
        updated_at=timezone.now(),
    )
    existing.refresh_from_db()
    logger.info(
        'inventory_incremented',
        household_id=str(household_id),
        item_id=str(item_id),
        delta=delta_quantity,
        quantity=existing.quantity,
    )
    return Reconciliation(record=existing, diff=Updated(before, snapshot(existing)))


def _locked_row(household_id, item_id) -> Optional[InventoryRecord]:
    return (
        InventoryRecord.objects
        .select_for_update()
        .filter(household_id=household_id, item_id=item_id)
        .first()
    )
