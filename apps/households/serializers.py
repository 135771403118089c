from rest_framework import serializers
from .models import Household, HouseholdMembership, Category


class HouseholdMemberSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(source='user.id', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)
    display_name = serializers.CharField(source='user.get_display_name', read_only=True)

    class Meta:
        model = HouseholdMembership
        fields = ['id', 'user_id', 'email', 'display_name', 'role', 'joined_at']
        read_only_fields = fields


class HouseholdSerializer(serializers.ModelSerializer):
    """Household with the requesting user's role."""

    role = serializers.SerializerMethodField()
    member_count = serializers.IntegerField(source='memberships.count', read_only=True)

    class Meta:
        model = Household
        fields = ['id', 'name', 'role', 'member_count', 'created_at', 'updated_at']
        read_only_fields = ['id', 'role', 'member_count', 'created_at', 'updated_at']

    def get_role(self, obj):
        request = self.context.get('request')
        if request is None:
            return None
        return obj.get_user_role(request.user)


class HouseholdCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)


class AddMemberSerializer(serializers.Serializer):
    email = serializers.EmailField()


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ['id', 'household', 'name', 'type', 'created_by', 'created_at']
        read_only_fields = fields
