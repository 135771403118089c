"""
Bill settlement.

Pays a pending bill: records the payment, marks the bill paid and derives
the bill-sourced Expense. The payment amount is not compared with the
bill amount; partial and over-payments settle the bill all the same.
"""

from django.utils import timezone

from apps.audit.diffs import snapshot
from apps.bills.models import Bill, BillPayment, BillStatus
from apps.operations.exceptions import InvalidStateError, NotFoundError
from apps.operations.serializers import BillSettlementParamsSerializer as ParamsSerializer

from .derivations import expense_from_bill_payment


def run(unit, params):
    bill = (
        Bill.objects
        .select_for_update()
        .filter(id=params['bill_id'], household_id=unit.household_id)
        .first()
    )
    if bill is None:
        raise NotFoundError('Bill not found.', field='bill_id')

    if bill.status != BillStatus.PENDING:
        raise InvalidStateError(
            f'Only pending bills can be settled; this bill is {bill.status}.',
            invariant='bill_pending',
        )

    payment = BillPayment.objects.create(
        bill=bill,
        amount=params['amount'],
        paid_on=timezone.now(),
        paid_by_id=unit.user_id,
        method=params['method'],
        notes=params['notes'],
    )
    unit.created(payment)

    before = snapshot(bill)
    bill.status = BillStatus.PAID
    bill.save(update_fields=['status', 'updated_at'])
    unit.updated(bill, before)

    expense = expense_from_bill_payment(bill=bill, payment=payment)
    expense.save(force_insert=True)
    unit.created(expense)

    return {'bill': bill, 'payment': payment, 'expense': expense}
