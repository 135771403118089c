from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'email', 'created_at', 'last_login']


class MembershipSummarySerializer(serializers.Serializer):
    household_id = serializers.UUIDField(source='household.id')
    household_name = serializers.CharField(source='household.name')
    role = serializers.CharField()


class CurrentUserSerializer(UserSerializer):
    """Profile plus the households the user belongs to."""

    memberships = MembershipSummarySerializer(
        source='household_memberships', many=True, read_only=True
    )

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['memberships']
