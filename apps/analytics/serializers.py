"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - API documentation and output formatting

Input Serializers:
    PeriodQuerySerializer - Validates the period parameter

Response Serializers:
    PeriodSummarySerializer - Month summary
    DashboardResponseSerializer - Dashboard summary
"""

from rest_framework import serializers

from apps.bills.serializers import BillSerializer
from apps.groceries.serializers import InventoryRecordSerializer


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class PeriodQuerySerializer(serializers.Serializer):
    """
    Validate the period query parameter.

    Query Parameters:
        period (str): Month period in YYYY-MM format (e.g., '2025-01').
            Defaults to the current month when omitted.
    """

    period = serializers.RegexField(
        regex=r'^\d{4}-(0[1-9]|1[0-2])$',
        required=False,
        help_text='Month period in YYYY-MM format',
        error_messages={'invalid': 'Invalid period format. Use YYYY-MM'},
    )


# =============================================================================
# Response Serializers
# =============================================================================

class CategoryTotalSerializer(serializers.Serializer):
    category = serializers.CharField(allow_null=True)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)


class WasteTotalSerializer(serializers.Serializer):
    reason = serializers.CharField()
    quantity = serializers.IntegerField()


class ContributionSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    display_name = serializers.CharField()
    total = serializers.DecimalField(max_digits=12, decimal_places=2)


class BudgetStatusSerializer(serializers.Serializer):
    period = serializers.CharField()
    limit = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    spent = serializers.DecimalField(max_digits=12, decimal_places=2)
    remaining = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    over_budget = serializers.BooleanField()


class PeriodSummarySerializer(serializers.Serializer):
    """
    Response serializer for a month summary.

    The category and waste mappings are rendered as lists so the
    uncategorized bucket survives as ``"category": null``.
    """
    period = serializers.CharField()
    expense_total = serializers.DecimalField(max_digits=12, decimal_places=2)
    expenses_by_category = serializers.SerializerMethodField()
    waste_by_reason = serializers.SerializerMethodField()
    contributions_by_payer = ContributionSerializer(many=True)
    budget = BudgetStatusSerializer()

    def get_expenses_by_category(self, obj) -> list:
        rows = [
            {'category': name, 'amount': amount}
            for name, amount in obj['expenses_by_category'].items()
        ]
        rows.sort(key=lambda row: (row['category'] is None, row['category'] or ''))
        return CategoryTotalSerializer(rows, many=True).data

    def get_waste_by_reason(self, obj) -> list:
        rows = [
            {'reason': reason, 'quantity': quantity}
            for reason, quantity in sorted(obj['waste_by_reason'].items())
        ]
        return WasteTotalSerializer(rows, many=True).data


class DashboardResponseSerializer(serializers.Serializer):
    """Response serializer for dashboard summary."""
    window_days = serializers.IntegerField()
    expiring_inventory = InventoryRecordSerializer(many=True)
    bills_due = BillSerializer(many=True)
    current_month = PeriodSummarySerializer()


class ErrorSerializer(serializers.Serializer):
    """Standard error response serializer."""
    error = serializers.CharField()
