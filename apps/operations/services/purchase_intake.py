"""
Purchase intake.

Records a shopping trip: the Purchase header, one PurchaseLine per line
in the given order, and the stock each line adds to the inventory.
"""

from django.utils import timezone

from apps.groceries.models import Item
from apps.households.services.actor import is_member
from apps.operations.exceptions import NotFoundError, ValidationError
from apps.operations.serializers import PurchaseIntakeParamsSerializer as ParamsSerializer
from apps.purchases.models import Purchase, PurchaseLine


def run(unit, params):
    paid_by_id = params.get('paid_by_id') or unit.user_id
    if not is_member(user_id=paid_by_id, household_id=unit.household_id):
        raise ValidationError(
            'The payer must be a member of the household.',
            field='paid_by_id',
        )

    purchase = Purchase.objects.create(
        household_id=unit.household_id,
        vendor=params['vendor'],
        purchase_date=params.get('purchase_date') or timezone.now(),
        total_amount=params['total_amount'],
        paid_by_id=paid_by_id,
        notes=params['notes'],
        created_by_id=unit.user_id,
    )
    unit.created(purchase)

    lines = []
    for position, line_params in enumerate(params['lines']):
        item = (
            Item.objects
            .filter(id=line_params['item_id'], household_id=unit.household_id)
            .first()
        )
        if item is None:
            raise NotFoundError('Item not found.', field=f'lines[{position}].item_id')

        line = PurchaseLine.objects.create(
            purchase=purchase,
            item=item,
            position=position,
            quantity=line_params['quantity'],
            unit=line_params.get('unit') or item.default_unit,
            line_total=line_params['line_total'],
        )
        unit.created(line)

        unit.reconcile(
            item_id=item.id,
            quantity=line.quantity,
            unit=line.unit,
            cost_delta=line.line_total,
        )
        lines.append(line)

    return {'purchase': purchase, 'lines': lines}
