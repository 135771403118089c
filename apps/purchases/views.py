from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.operations.mixins import ActorMixin, HouseholdPagination, MutationViewSetMixin
from apps.operations.serializers import (
    PurchaseIntakeParamsSerializer,
    ShoppingListPromotionParamsSerializer,
    ShoppingListWriteSerializer,
)
from apps.operations.services import Operation
from .models import Purchase, ShoppingListEntry
from .serializers import (
    PurchaseSerializer,
    PurchaseListSerializer,
    PurchaseFilterSerializer,
    ShoppingListEntrySerializer,
    ShoppingListFilterSerializer,
    PromotionResultSerializer,
)


@extend_schema_view(list=extend_schema(parameters=[PurchaseFilterSerializer]))
class PurchaseViewSet(
    ActorMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet
):
    """
    Household purchases.

    list: Purchases of the household (filterable by payer and date)
    create: Record a purchase with its lines (stock is updated)
    retrieve: Purchase with lines
    """

    serializer_class = PurchaseSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = HouseholdPagination

    def get_queryset(self):
        queryset = (
            Purchase.objects
            .filter(household_id=self.get_actor().household_id)
            .select_related('paid_by')
            .prefetch_related('lines__item')
        )

        if self.action != 'list':
            return queryset

        filter_serializer = PurchaseFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'paid_by' in params:
            queryset = queryset.filter(paid_by_id=params['paid_by'])
        if 'date_from' in params:
            queryset = queryset.filter(purchase_date__date__gte=params['date_from'])
        if 'date_to' in params:
            queryset = queryset.filter(purchase_date__date__lte=params['date_to'])

        return queryset

    def get_serializer_class(self):
        if self.action == 'list':
            return PurchaseListSerializer
        return PurchaseSerializer

    @extend_schema(
        request=PurchaseIntakeParamsSerializer,
        responses={201: PurchaseSerializer},
    )
    def create(self, request, *args, **kwargs):
        result = self.run_operation(Operation.PURCHASE_INTAKE, request.data)
        return Response(
            PurchaseSerializer(result.payload['purchase']).data,
            status=status.HTTP_201_CREATED
        )


@extend_schema_view(
    list=extend_schema(parameters=[ShoppingListFilterSerializer]),
    create=extend_schema(request=ShoppingListWriteSerializer),
    update=extend_schema(request=ShoppingListWriteSerializer),
    partial_update=extend_schema(request=ShoppingListWriteSerializer),
)
class ShoppingListViewSet(MutationViewSetMixin, viewsets.ModelViewSet):
    """
    Shopping list.

    Pending entries can be edited, deleted, or promoted into a purchase.
    Purchased entries are read-only.
    """

    queryset = ShoppingListEntry.objects.all()
    serializer_class = ShoppingListEntrySerializer
    permission_classes = [IsAuthenticated]
    mutation_table = 'shopping_list'

    def get_queryset(self):
        queryset = super().get_queryset()

        filter_serializer = ShoppingListFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        entry_status = filter_serializer.validated_data.get('status')

        if entry_status == 'pending':
            queryset = queryset.filter(purchased_at__isnull=True)
        elif entry_status == 'purchased':
            queryset = queryset.filter(purchased_at__isnull=False)

        return queryset

    @extend_schema(
        request=ShoppingListPromotionParamsSerializer,
        responses={201: PromotionResultSerializer},
    )
    @action(detail=False, methods=['post'])
    def promote(self, request):
        """
        Turn pending entries into one purchase.

        POST /api/purchases/shopping-list/promote/
        Body: {"entry_ids": ["<uuid>", ...]}
        """
        result = self.run_operation(Operation.SHOPPING_LIST_PROMOTION, request.data)
        return Response(
            PromotionResultSerializer(result.payload).data,
            status=status.HTTP_201_CREATED
        )
