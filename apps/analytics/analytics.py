"""
Analytics Module
=================

Read-only reporting over a household's expenses, waste, purchases and
budgets for one calendar month.

Classes:
    ReportingQueries: Static methods for the period summaries and dashboard.

Example:
    Getting a month summary::

        from apps.analytics.analytics import ReportingQueries

        summary = ReportingQueries.period_summary(household.id, '2025-01')
        print(summary['expense_total'])           # Decimal('17.50')
        print(summary['expenses_by_category'])    # {'Food': Decimal('15.50'), None: Decimal('2.00')}

Note:
    Sums are computed in Python over the ``Decimal`` values stored in the
    database, starting from ``Decimal('0.00')``; no value passes through a
    float. Periods are matched with ``__year``/``__month`` lookups, which is
    a real calendar-month match in the active time zone.
"""

import re
from collections import defaultdict
from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.utils import timezone

from apps.bills.models import Bill, BillStatus, Budget, Expense
from apps.groceries.models import InventoryRecord, WasteEvent
from apps.purchases.models import Purchase
from .exceptions import InvalidPeriodError

PERIOD_PATTERN = re.compile(r'^(\d{4})-(0[1-9]|1[0-2])$')
ZERO = Decimal('0.00')


def parse_period(period):
    """
    Split a ``YYYY-MM`` period into (year, month).

    Raises:
        InvalidPeriodError: If the period is not a valid YYYY-MM string.
    """
    match = PERIOD_PATTERN.match(period or '')
    if not match:
        raise InvalidPeriodError("Invalid period format. Use YYYY-MM")
    return int(match.group(1)), int(match.group(2))


class ReportingQueries:
    """
    Period reporting queries.

    Every method is filtered by household and returns plain Python data
    (dicts, lists, Decimals), ready for the response serializers.

    Methods:
        expense_total: Sum of expenses in the period.
        expenses_by_category: Expense sums keyed by category name.
        waste_by_reason: Wasted quantity keyed by reason.
        contributions_by_payer: Purchase totals per paying member.
        budget_status: Budget limit against spending.
        period_summary: All of the above for one period.
        dashboard: Expiring stock, bills due soon and this month's summary.
    """

    @staticmethod
    def _expenses(household_id, period):
        year, month = parse_period(period)
        return Expense.objects.filter(
            household_id=household_id,
            date__year=year,
            date__month=month,
        )

    @staticmethod
    def expense_total(household_id, period):
        """Total amount of the household's expenses in the period."""
        amounts = ReportingQueries._expenses(household_id, period).values_list('amount', flat=True)
        return sum(amounts, ZERO)

    @staticmethod
    def expenses_by_category(household_id, period):
        """
        Expense sums grouped by category name.

        Uncategorized expenses are kept under the ``None`` key.

        Example:
            Expenses Food 10.00, Food 5.50 and an uncategorized 2.00 give::

                {'Food': Decimal('15.50'), None: Decimal('2.00')}
        """
        rows = (
            ReportingQueries._expenses(household_id, period)
            .values_list('category__name', 'amount')
        )
        totals = defaultdict(lambda: ZERO)
        for category_name, amount in rows:
            totals[category_name] += amount
        return dict(totals)

    @staticmethod
    def waste_by_reason(household_id, period):
        year, month = parse_period(period)
        rows = WasteEvent.objects.filter(
            household_id=household_id,
            event_date__year=year,
            event_date__month=month,
        ).values_list('reason', 'quantity')

        totals = defaultdict(int)
        for reason, quantity in rows:
            totals[reason] += quantity
        return dict(totals)

    @staticmethod
    def contributions_by_payer(household_id, period):
        """
        Purchase totals grouped by the member who paid.

        Returns:
            list[dict]: ``user_id``, ``display_name`` and ``total`` per payer,
            highest total first.
        """
        year, month = parse_period(period)
        rows = Purchase.objects.filter(
            household_id=household_id,
            purchase_date__year=year,
            purchase_date__month=month,
        ).values_list('paid_by_id', 'paid_by__display_name', 'paid_by__email', 'total_amount')

        contributions = {}
        for user_id, display_name, email, amount in rows:
            entry = contributions.setdefault(user_id, {
                'user_id': user_id,
                'display_name': display_name or email.split('@')[0],
                'total': ZERO,
            })
            entry['total'] += amount

        return sorted(
            contributions.values(),
            key=lambda entry: (-entry['total'], entry['display_name'])
        )

    @staticmethod
    def budget_status(household_id, period):
        """
        Budget limit for the period against what was spent.

        ``limit`` and ``remaining`` are None when no budget is set.
        """
        spent = ReportingQueries.expense_total(household_id, period)
        budget = Budget.objects.filter(household_id=household_id, period=period).first()

        if budget is None:
            return {
                'period': period,
                'limit': None,
                'spent': spent,
                'remaining': None,
                'over_budget': False,
            }

        return {
            'period': period,
            'limit': budget.limit_amount,
            'spent': spent,
            'remaining': budget.limit_amount - spent,
            'over_budget': spent > budget.limit_amount,
        }

    @staticmethod
    def period_summary(household_id, period):
        parse_period(period)
        return {
            'period': period,
            'expense_total': ReportingQueries.expense_total(household_id, period),
            'expenses_by_category': ReportingQueries.expenses_by_category(household_id, period),
            'waste_by_reason': ReportingQueries.waste_by_reason(household_id, period),
            'contributions_by_payer': ReportingQueries.contributions_by_payer(household_id, period),
            'budget': ReportingQueries.budget_status(household_id, period),
        }

    @staticmethod
    def dashboard(household_id, today=None):
        """
        Everything the household dashboard shows.

        Args:
            household_id (UUID): The household.
            today (date, optional): Reference day. Defaults to the local date.

        Returns:
            dict: A dictionary containing:
                - expiring_inventory (list[InventoryRecord]): Stock expiring
                  between today and the end of the window.
                - bills_due (list[Bill]): Pending bills due on or before the
                  end of the window, overdue ones included.
                - current_month (dict): ``period_summary`` of today's month.
        """
        today = today or timezone.localdate()
        window_end = today + timedelta(days=settings.HOUSEHOLD_EXPIRY_WINDOW_DAYS)

        expiring = (
            InventoryRecord.objects
            .filter(
                household_id=household_id,
                quantity__gt=0,
                expiry_date__gte=today,
                expiry_date__lte=window_end,
            )
            .select_related('item')
            .order_by('expiry_date')
        )

        bills_due = (
            Bill.objects
            .filter(
                household_id=household_id,
                status=BillStatus.PENDING,
                due_date__lte=window_end,
            )
            .select_related('category')
            .prefetch_related('payments')
            .order_by('due_date')
        )

        return {
            'window_days': settings.HOUSEHOLD_EXPIRY_WINDOW_DAYS,
            'expiring_inventory': list(expiring),
            'bills_due': list(bills_due),
            'current_month': ReportingQueries.period_summary(
                household_id,
                today.strftime('%Y-%m')
            ),
        }
