"""
Derivation rules.

Pure functions that build a new, unsaved record from committed ones.
Callers save and audit the result inside their unit of work.
"""

from decimal import Decimal

from apps.bills.models import Bill, BillPayment, Expense, ExpenseSource
from apps.groceries.models import Item
from apps.purchases.models import Purchase, PurchaseLine, ShoppingListEntry

PROMOTED_UNIT = 'unit'


def expense_from_bill_payment(*, bill: Bill, payment: BillPayment) -> Expense:
    """Expense recording the money that left the household for a bill."""
    return Expense(
        household_id=bill.household_id,
        date=payment.paid_on,
        amount=payment.amount,
        category_id=bill.category_id,
        description=f'Bill payment for {bill.name}',
        source=ExpenseSource.BILL,
        linked_entity_id=bill.id,
    )


def item_from_shopping_entry(*, entry: ShoppingListEntry, actor_id) -> Item:
    """Catalog item for a shopping entry whose name is not in the catalog yet."""
    return Item(
        household_id=entry.household_id,
        name=entry.item_name.strip(),
        default_unit=PROMOTED_UNIT,
        created_by_id=actor_id,
    )


def purchase_line_from_shopping_entry(
    *,
    entry: ShoppingListEntry,
    purchase: Purchase,
    item: Item,
    position: int
) -> PurchaseLine:
    # Shopping entries carry no quantity or price
    return PurchaseLine(
        purchase=purchase,
        item=item,
        position=position,
        quantity=1,
        unit=PROMOTED_UNIT,
        line_total=Decimal('0.00'),
    )
