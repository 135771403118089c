from rest_framework import serializers
from .models import Purchase, PurchaseLine, ShoppingListEntry


# =============================================================================
# Response serializers
# =============================================================================

class PurchaseLineSerializer(serializers.ModelSerializer):
    item_name = serializers.CharField(source='item.name', read_only=True)

    class Meta:
        model = PurchaseLine
        fields = ['id', 'position', 'item', 'item_name', 'quantity', 'unit', 'line_total']
        read_only_fields = fields


class PurchaseSerializer(serializers.ModelSerializer):
    """Purchase header with its ordered lines."""

    lines = PurchaseLineSerializer(many=True, read_only=True)
    paid_by_name = serializers.CharField(source='paid_by.get_display_name', read_only=True)

    class Meta:
        model = Purchase
        fields = [
            'id',
            'vendor',
            'purchase_date',
            'total_amount',
            'paid_by',
            'paid_by_name',
            'notes',
            'created_by',
            'created_at',
            'lines',
        ]
        read_only_fields = fields


class PurchaseListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for purchase lists."""

    line_count = serializers.IntegerField(source='lines.count', read_only=True)

    class Meta:
        model = Purchase
        fields = ['id', 'vendor', 'purchase_date', 'total_amount', 'paid_by', 'line_count']
        read_only_fields = fields


class ShoppingListEntrySerializer(serializers.ModelSerializer):
    is_pending = serializers.BooleanField(read_only=True)

    class Meta:
        model = ShoppingListEntry
        fields = [
            'id',
            'item_name',
            'added_by',
            'created_at',
            'is_pending',
            'purchased_at',
            'purchase',
            'purchase_line',
        ]
        read_only_fields = fields


class PromotionResultSerializer(serializers.Serializer):
    purchase = PurchaseSerializer()
    entries = ShoppingListEntrySerializer(many=True)


# =============================================================================
# Input serializers
# =============================================================================

class PurchaseFilterSerializer(serializers.Serializer):
    """Query parameters for the purchase list."""
    paid_by = serializers.UUIDField(required=False)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        if attrs.get('date_from') and attrs.get('date_to'):
            if attrs['date_from'] > attrs['date_to']:
                raise serializers.ValidationError({
                    'date_to': 'date_to must be after date_from'
                })
        return attrs


class ShoppingListFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=['pending', 'purchased'], required=False)
