from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.operations.mixins import MutationViewSetMixin
from apps.operations.serializers import (
    BillWriteSerializer,
    BudgetWriteSerializer,
    ExpenseWriteSerializer,
)
from apps.operations.services import Operation
from .models import Bill, Expense, Budget
from .serializers import (
    BillSerializer,
    BillFilterSerializer,
    ExpenseSerializer,
    ExpenseFilterSerializer,
    BudgetSerializer,
    SettleBillInputSerializer,
    SettlementResultSerializer,
)


@extend_schema_view(
    list=extend_schema(parameters=[BillFilterSerializer]),
    create=extend_schema(request=BillWriteSerializer),
    update=extend_schema(request=BillWriteSerializer),
    partial_update=extend_schema(request=BillWriteSerializer),
)
class BillViewSet(MutationViewSetMixin, viewsets.ModelViewSet):
    """
    Household bills.

    Bills with payments cannot be deleted. Pay a bill with POST {id}/settle/.
    """

    queryset = Bill.objects.select_related('category').prefetch_related('payments')
    serializer_class = BillSerializer
    permission_classes = [IsAuthenticated]
    mutation_table = 'bills'

    def get_queryset(self):
        queryset = super().get_queryset()

        filter_serializer = BillFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'status' in params:
            queryset = queryset.filter(status=params['status'])
        if 'due_before' in params:
            queryset = queryset.filter(due_date__lte=params['due_before'])

        return queryset

    @extend_schema(
        request=SettleBillInputSerializer,
        responses={201: SettlementResultSerializer},
    )
    @action(detail=True, methods=['post'])
    def settle(self, request, pk=None):
        """
        Pay a pending bill.

        POST /api/bills/{id}/settle/
        Body: {"amount": "42.00", "method": "card", "notes": "optional"}
        """
        params = {
            'bill_id': pk,
            'amount': request.data.get('amount'),
            'method': request.data.get('method', ''),
            'notes': request.data.get('notes', ''),
        }
        result = self.run_operation(Operation.BILL_SETTLEMENT, params)
        return Response(
            SettlementResultSerializer(result.payload).data,
            status=status.HTTP_201_CREATED
        )


@extend_schema_view(
    list=extend_schema(parameters=[ExpenseFilterSerializer]),
    create=extend_schema(request=ExpenseWriteSerializer),
    update=extend_schema(request=ExpenseWriteSerializer),
    partial_update=extend_schema(request=ExpenseWriteSerializer),
)
class ExpenseViewSet(MutationViewSetMixin, viewsets.ModelViewSet):
    """Household expenses. Bill-sourced expenses are read-only."""

    queryset = Expense.objects.select_related('category')
    serializer_class = ExpenseSerializer
    permission_classes = [IsAuthenticated]
    mutation_table = 'expenses'

    def get_queryset(self):
        queryset = super().get_queryset()

        filter_serializer = ExpenseFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'period' in params:
            year, month = params['period'].split('-')
            queryset = queryset.filter(date__year=int(year), date__month=int(month))
        if 'source' in params:
            queryset = queryset.filter(source=params['source'])

        return queryset


@extend_schema_view(
    create=extend_schema(request=BudgetWriteSerializer),
    update=extend_schema(request=BudgetWriteSerializer),
    partial_update=extend_schema(request=BudgetWriteSerializer),
)
class BudgetViewSet(MutationViewSetMixin, viewsets.ModelViewSet):
    """Monthly budgets, at most one per period."""

    queryset = Budget.objects.all()
    serializer_class = BudgetSerializer
    permission_classes = [IsAuthenticated]
    mutation_table = 'budgets'
