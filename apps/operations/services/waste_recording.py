"""
Waste recording.

Takes thrown-away stock out of an inventory record and logs a WasteEvent.
Stock never goes negative.
"""

from django.db.models import F
from django.utils import timezone

from apps.audit.diffs import snapshot
from apps.groceries.models import InventoryRecord, WasteEvent
from apps.operations.exceptions import InvalidStateError, NotFoundError
from apps.operations.serializers import WasteRecordingParamsSerializer as ParamsSerializer


def run(unit, params):
    record = (
        InventoryRecord.objects
        .select_for_update()
        .filter(id=params['inventory_record_id'], household_id=unit.household_id)
        .first()
    )
    if record is None:
        raise NotFoundError('Inventory record not found.', field='inventory_record_id')

    quantity = params['quantity']
    if quantity > record.quantity:
        raise InvalidStateError(
            f'Cannot waste {quantity}; only {record.quantity} in stock.',
            invariant='non_negative_stock',
        )

    before = snapshot(record)
    InventoryRecord.objects.filter(pk=record.pk).update(
        quantity=F('quantity') - quantity,
        updated_by_id=unit.user_id,
        updated_at=timezone.now(),
    )
    record.refresh_from_db()
    unit.updated(record, before)

    event = WasteEvent.objects.create(
        household_id=unit.household_id,
        inventory_record=record,
        item_id=record.item_id,
        quantity=quantity,
        unit=params.get('unit') or record.unit,
        reason=params['reason'],
        event_date=timezone.now(),
        recorded_by_id=unit.user_id,
    )
    unit.created(event)

    return {'waste_event': event, 'inventory': record}
