from datetime import timedelta

from django.utils import timezone
from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.households.models import Category
from apps.households.serializers import CategorySerializer
from apps.operations.mixins import ActorMixin, HouseholdPagination, MutationViewSetMixin
from apps.operations.serializers import (
    CategoryWriteSerializer,
    InventoryWriteSerializer,
    ItemWriteSerializer,
    WasteRecordingParamsSerializer,
)
from apps.operations.services import Operation
from .models import Item, InventoryRecord, WasteEvent
from .serializers import (
    ItemSerializer,
    InventoryRecordSerializer,
    InventoryFilterSerializer,
    WasteEventSerializer,
    WasteRecordedSerializer,
)


@extend_schema_view(
    create=extend_schema(request=ItemWriteSerializer),
    update=extend_schema(request=ItemWriteSerializer),
    partial_update=extend_schema(request=ItemWriteSerializer),
)
class ItemViewSet(MutationViewSetMixin, viewsets.ModelViewSet):
    """Household item catalog. Items still referenced cannot be deleted."""

    queryset = Item.objects.select_related('default_category')
    serializer_class = ItemSerializer
    permission_classes = [IsAuthenticated]
    mutation_table = 'items'

    def get_queryset(self):
        queryset = super().get_queryset()
        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(name__icontains=search)
        return queryset


@extend_schema_view(
    create=extend_schema(request=CategoryWriteSerializer),
    update=extend_schema(request=CategoryWriteSerializer),
    partial_update=extend_schema(request=CategoryWriteSerializer),
)
class CategoryViewSet(MutationViewSetMixin, viewsets.ModelViewSet):
    """Grocery and expense categories. Filter with ?type=grocery|expense."""

    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = [IsAuthenticated]
    mutation_table = 'categories'

    def get_queryset(self):
        queryset = super().get_queryset()
        category_type = self.request.query_params.get('type')
        if category_type:
            queryset = queryset.filter(type=category_type)
        return queryset


@extend_schema_view(
    list=extend_schema(parameters=[InventoryFilterSerializer]),
    create=extend_schema(request=InventoryWriteSerializer),
    update=extend_schema(request=InventoryWriteSerializer),
    partial_update=extend_schema(request=InventoryWriteSerializer),
)
class InventoryViewSet(MutationViewSetMixin, viewsets.ModelViewSet):
    """Stock on hand, one row per item."""

    queryset = InventoryRecord.objects.select_related('item')
    serializer_class = InventoryRecordSerializer
    permission_classes = [IsAuthenticated]
    mutation_table = 'inventory'

    def get_queryset(self):
        queryset = super().get_queryset()

        filter_serializer = InventoryFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'storage' in params:
            queryset = queryset.filter(storage=params['storage'])
        if 'item' in params:
            queryset = queryset.filter(item_id=params['item'])
        if 'expiring_within' in params:
            today = timezone.localdate()
            queryset = queryset.filter(
                expiry_date__gte=today,
                expiry_date__lte=today + timedelta(days=params['expiring_within'])
            )

        return queryset


class WasteEventViewSet(ActorMixin, mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    Waste log.

    list: Waste events of the household
    create: Record waste, taking the quantity out of stock
    """

    serializer_class = WasteEventSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = HouseholdPagination

    def get_queryset(self):
        return (
            WasteEvent.objects
            .filter(household_id=self.get_actor().household_id)
            .select_related('item')
        )

    @extend_schema(
        request=WasteRecordingParamsSerializer,
        responses={201: WasteRecordedSerializer},
    )
    def create(self, request, *args, **kwargs):
        result = self.run_operation(Operation.WASTE_RECORDING, request.data)
        return Response(
            WasteRecordedSerializer(result.payload).data,
            status=status.HTTP_201_CREATED
        )
