from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .models import Household
from .serializers import (
    HouseholdSerializer,
    HouseholdCreateSerializer,
    HouseholdMemberSerializer,
    AddMemberSerializer,
)
from apps.households.services import (
    create_household,
    add_member,
    get_household_members,
)


class HouseholdViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Households the current user belongs to.

    list: Households of the current user
    create: Create a household (creator becomes owner)
    retrieve: Household details
    members: List members (GET) or add one by email (POST, owners only)
    """

    serializer_class = HouseholdSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return (
            Household.objects
            .filter(memberships__user=self.request.user)
            .prefetch_related('memberships')
            .distinct()
        )

    @extend_schema(request=HouseholdCreateSerializer, responses={201: HouseholdSerializer})
    def create(self, request, *args, **kwargs):
        """Create household via service."""
        serializer = HouseholdCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        household = create_household(
            name=serializer.validated_data['name'],
            owner=request.user
        )
        return Response(
            HouseholdSerializer(household, context={'request': request}).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=AddMemberSerializer, responses=HouseholdMemberSerializer(many=True))
    @action(detail=True, methods=['get', 'post'])
    def members(self, request, pk=None):
        """List members or add a member by email."""
        household = self.get_object()

        if request.method == 'POST':
            serializer = AddMemberSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            membership = add_member(
                household_id=household.id,
                email=serializer.validated_data['email'],
                added_by=request.user
            )
            return Response(
                HouseholdMemberSerializer(membership).data,
                status=status.HTTP_201_CREATED
            )

        members = get_household_members(household_id=household.id)
        return Response(HouseholdMemberSerializer(members, many=True).data)
