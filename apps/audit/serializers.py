from rest_framework import serializers
from .models import AuditLogEntry


class AuditLogEntrySerializer(serializers.ModelSerializer):
    """Audit entry in its published shape (camelCase keys)."""

    householdId = serializers.UUIDField(source='household_id', read_only=True)
    userId = serializers.UUIDField(source='user_id', read_only=True)
    entityTable = serializers.CharField(source='entity_table', read_only=True)
    entityId = serializers.UUIDField(source='entity_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = AuditLogEntry
        fields = [
            'id',
            'householdId',
            'userId',
            'entityTable',
            'entityId',
            'action',
            'diff',
            'createdAt',
        ]
        read_only_fields = fields


class AuditFilterSerializer(serializers.Serializer):
    entity_table = serializers.CharField(required=False)
    entity_id = serializers.UUIDField(required=False)
    action = serializers.ChoiceField(
        choices=['create', 'update', 'delete'],
        required=False
    )
