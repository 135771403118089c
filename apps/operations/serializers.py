"""
Input serializers for household operations.

Each operation validates its ``params`` with one of the ``*ParamsSerializer``
classes below before any transaction is opened. Simple mutations also
validate their ``data`` payload with the write serializer of the target
table (``WRITE_SERIALIZERS``); updates validate it partially.

Foreign keys are plain ``*_id`` UUID fields. Whether the referenced row
belongs to the actor's household is checked inside the operation.
"""
from decimal import Decimal

from rest_framework import serializers

from apps.bills.models import BillStatus, ExpenseSource, period_validator
from apps.groceries.models import StorageLocation, WasteReason
from apps.households.models import CategoryType


# =============================================================================
# Compound operation params
# =============================================================================

class PurchaseLineParamsSerializer(serializers.Serializer):
    item_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1)
    unit = serializers.CharField(max_length=20, required=False, allow_blank=True)
    line_total = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00'),
        default=Decimal('0.00')
    )


class PurchaseIntakeParamsSerializer(serializers.Serializer):
    vendor = serializers.CharField(max_length=200, allow_blank=True, default='')
    purchase_date = serializers.DateTimeField(required=False)
    total_amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00'),
        default=Decimal('0.00')
    )
    paid_by_id = serializers.UUIDField(required=False, allow_null=True)
    notes = serializers.CharField(allow_blank=True, default='')
    lines = PurchaseLineParamsSerializer(many=True, default=list)


class BillSettlementParamsSerializer(serializers.Serializer):
    bill_id = serializers.UUIDField()
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    method = serializers.CharField(max_length=50, allow_blank=True, default='')
    notes = serializers.CharField(allow_blank=True, default='')


class ShoppingListPromotionParamsSerializer(serializers.Serializer):
    entry_ids = serializers.ListField(
        child=serializers.UUIDField(),
        allow_empty=True,
        default=list
    )


class WasteRecordingParamsSerializer(serializers.Serializer):
    inventory_record_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1)
    reason = serializers.ChoiceField(choices=WasteReason.choices)
    unit = serializers.CharField(max_length=20, required=False, allow_blank=True)


# =============================================================================
# Simple mutation write serializers (one per table)
# =============================================================================

class ItemWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    default_unit = serializers.CharField(max_length=20, default='unit')
    default_category_id = serializers.UUIDField(required=False, allow_null=True)
    perishable = serializers.BooleanField(default=False)


class CategoryWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    type = serializers.ChoiceField(choices=CategoryType.choices)


class InventoryWriteSerializer(serializers.Serializer):
    item_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=0)
    unit = serializers.CharField(max_length=20, default='unit')
    storage = serializers.ChoiceField(
        choices=StorageLocation.choices,
        default=StorageLocation.PANTRY
    )
    purchase_date = serializers.DateField(required=False, allow_null=True)
    expiry_date = serializers.DateField(required=False, allow_null=True)
    cost_total = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00'),
        default=Decimal('0.00')
    )
    notes = serializers.CharField(allow_blank=True, default='')


class BillWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    vendor = serializers.CharField(max_length=200, allow_blank=True, default='')
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00')
    )
    due_date = serializers.DateField()
    status = serializers.ChoiceField(choices=BillStatus.choices, default=BillStatus.PENDING)
    recurring_rule = serializers.CharField(max_length=100, allow_blank=True, default='')
    category_id = serializers.UUIDField(required=False, allow_null=True)
    notes = serializers.CharField(allow_blank=True, default='')


class BudgetWriteSerializer(serializers.Serializer):
    period = serializers.CharField(max_length=7, validators=[period_validator])
    limit_amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00')
    )


class ExpenseWriteSerializer(serializers.Serializer):
    date = serializers.DateTimeField(required=False)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    category_id = serializers.UUIDField(required=False, allow_null=True)
    description = serializers.CharField(max_length=255, allow_blank=True, default='')
    source = serializers.ChoiceField(choices=ExpenseSource.choices, default=ExpenseSource.OTHER)
    linked_entity_id = serializers.UUIDField(required=False, allow_null=True)

    def validate_source(self, value):
        if value == ExpenseSource.BILL:
            raise serializers.ValidationError(
                'Bill expenses are created by settling the bill.'
            )
        return value


class ShoppingListWriteSerializer(serializers.Serializer):
    item_name = serializers.CharField(max_length=200)

    def validate_item_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Item name cannot be blank.')
        return value


WRITE_SERIALIZERS = {
    'items': ItemWriteSerializer,
    'categories': CategoryWriteSerializer,
    'inventory': InventoryWriteSerializer,
    'bills': BillWriteSerializer,
    'budgets': BudgetWriteSerializer,
    'expenses': ExpenseWriteSerializer,
    'shopping_list': ShoppingListWriteSerializer,
}


class SimpleMutationParamsSerializer(serializers.Serializer):
    table = serializers.ChoiceField(choices=list(WRITE_SERIALIZERS))
    action = serializers.ChoiceField(choices=['create', 'update', 'delete'])
    record_id = serializers.UUIDField(required=False, allow_null=True)
    data = serializers.DictField(default=dict)

    def validate(self, attrs):
        action = attrs['action']
        if action in ('update', 'delete') and not attrs.get('record_id'):
            raise serializers.ValidationError({
                'record_id': 'This field is required for update and delete.'
            })

        if action == 'delete':
            attrs['data'] = {}
            return attrs

        write_serializer = WRITE_SERIALIZERS[attrs['table']](
            data=attrs['data'],
            partial=(action == 'update')
        )
        if not write_serializer.is_valid():
            # Report the offending field of the record itself
            raise serializers.ValidationError(write_serializer.errors)
        attrs['data'] = dict(write_serializer.validated_data)
        return attrs
