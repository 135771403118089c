from rest_framework import serializers
from .models import Item, InventoryRecord, WasteEvent


class ItemSerializer(serializers.ModelSerializer):
    default_category_name = serializers.CharField(
        source='default_category.name',
        read_only=True,
        default=None
    )

    class Meta:
        model = Item
        fields = [
            'id',
            'name',
            'default_unit',
            'default_category',
            'default_category_name',
            'perishable',
            'created_by',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class InventoryRecordSerializer(serializers.ModelSerializer):
    """Stock row with the item name for display."""

    item_name = serializers.CharField(source='item.name', read_only=True)

    class Meta:
        model = InventoryRecord
        fields = [
            'id',
            'item',
            'item_name',
            'quantity',
            'unit',
            'storage',
            'purchase_date',
            'expiry_date',
            'cost_total',
            'notes',
            'created_by',
            'updated_by',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class WasteEventSerializer(serializers.ModelSerializer):
    item_name = serializers.CharField(source='item.name', read_only=True)

    class Meta:
        model = WasteEvent
        fields = [
            'id',
            'inventory_record',
            'item',
            'item_name',
            'quantity',
            'unit',
            'reason',
            'event_date',
            'recorded_by',
        ]
        read_only_fields = fields


class WasteRecordedSerializer(serializers.Serializer):
    waste_event = WasteEventSerializer()
    inventory = InventoryRecordSerializer()


class InventoryFilterSerializer(serializers.Serializer):
    storage = serializers.CharField(required=False)
    item = serializers.UUIDField(required=False)
    expiring_within = serializers.IntegerField(
        required=False,
        min_value=0,
        help_text="Only records expiring within this many days"
    )
