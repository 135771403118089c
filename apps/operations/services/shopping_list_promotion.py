"""
Shopping-list promotion.

Turns pending shopping-list entries into one Purchase: each entry becomes
a PurchaseLine of one unit, adds one unit of stock, and is marked
purchased. Promotion is terminal; purchased entries are never picked again.

The batch purchase keeps ``total_amount`` at zero. Entries carry no
prices, so their lines total zero as well.
"""

from decimal import Decimal

from django.utils import timezone

from apps.audit.diffs import snapshot
from apps.groceries.models import Item
from apps.operations.exceptions import NoItemsSelectedError
from apps.operations.serializers import ShoppingListPromotionParamsSerializer as ParamsSerializer
from apps.purchases.models import Purchase, ShoppingListEntry

from .derivations import item_from_shopping_entry, purchase_line_from_shopping_entry

PROMOTION_VENDOR = 'Shopping List Purchase'


def run(unit, params):
    entry_ids = list(dict.fromkeys(params['entry_ids']))

    pending = {
        entry.id: entry
        for entry in (
            ShoppingListEntry.objects
            .select_for_update()
            .filter(
                household_id=unit.household_id,
                id__in=entry_ids,
                purchased_at__isnull=True,
            )
        )
    }
    entries = [pending[entry_id] for entry_id in entry_ids if entry_id in pending]
    if not entries:
        raise NoItemsSelectedError()

    now = timezone.now()
    purchase = Purchase.objects.create(
        household_id=unit.household_id,
        vendor=PROMOTION_VENDOR,
        purchase_date=now,
        total_amount=Decimal('0.00'),
        paid_by_id=unit.user_id,
        created_by_id=unit.user_id,
    )
    unit.created(purchase)

    for position, entry in enumerate(entries):
        item = _resolve_item(unit, entry)

        line = purchase_line_from_shopping_entry(
            entry=entry,
            purchase=purchase,
            item=item,
            position=position,
        )
        line.save(force_insert=True)
        unit.created(line)

        unit.reconcile(item_id=item.id, quantity=line.quantity, unit=line.unit)

        before = snapshot(entry)
        entry.purchased_at = now
        entry.purchase = purchase
        entry.purchase_line = line
        entry.save(update_fields=['purchased_at', 'purchase', 'purchase_line'])
        unit.updated(entry, before)

    return {'purchase': purchase, 'entries': entries}


def _resolve_item(unit, entry) -> Item:
    """Catalog item matching the entry name (case-insensitive), created when absent."""
    item = (
        Item.objects
        .filter(household_id=unit.household_id, name__iexact=entry.item_name.strip())
        .order_by('created_at')
        .first()
    )
    if item is None:
        item = item_from_shopping_entry(entry=entry, actor_id=unit.user_id)
        item.save(force_insert=True)
        unit.created(item)
    return item
