from rest_framework import serializers
from .models import Bill, BillPayment, Expense, Budget


class BillPaymentSerializer(serializers.ModelSerializer):
    class Meta:
        model = BillPayment
        fields = ['id', 'bill', 'amount', 'paid_on', 'paid_by', 'method', 'notes']
        read_only_fields = fields


class BillSerializer(serializers.ModelSerializer):
    category_name = serializers.CharField(source='category.name', read_only=True, default=None)
    payments = BillPaymentSerializer(many=True, read_only=True)

    class Meta:
        model = Bill
        fields = [
            'id',
            'name',
            'vendor',
            'amount',
            'due_date',
            'status',
            'recurring_rule',
            'category',
            'category_name',
            'notes',
            'created_by',
            'created_at',
            'updated_at',
            'payments',
        ]
        read_only_fields = fields


class ExpenseSerializer(serializers.ModelSerializer):
    category_name = serializers.CharField(source='category.name', read_only=True, default=None)

    class Meta:
        model = Expense
        fields = [
            'id',
            'date',
            'amount',
            'category',
            'category_name',
            'description',
            'source',
            'linked_entity_id',
            'created_at',
        ]
        read_only_fields = fields


class BudgetSerializer(serializers.ModelSerializer):
    class Meta:
        model = Budget
        fields = ['id', 'period', 'limit_amount', 'created_at', 'updated_at']
        read_only_fields = fields


class SettlementResultSerializer(serializers.Serializer):
    bill = BillSerializer()
    payment = BillPaymentSerializer()
    expense = ExpenseSerializer()


class SettleBillInputSerializer(serializers.Serializer):
    """Body of POST /api/bills/{id}/settle/ (the bill comes from the URL)."""
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    method = serializers.CharField(required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True)


class BillFilterSerializer(serializers.Serializer):
    status = serializers.CharField(required=False)
    due_before = serializers.DateField(required=False)


class ExpenseFilterSerializer(serializers.Serializer):
    period = serializers.RegexField(
        r'^\d{4}-(0[1-9]|1[0-2])$',
        required=False,
        error_messages={'invalid': 'Period must be in YYYY-MM format.'}
    )
    source = serializers.CharField(required=False)
