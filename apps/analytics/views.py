from django.conf import settings
from django.utils import timezone
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.households.services import resolve_actor
from .analytics import ReportingQueries
from .exceptions import AnalyticsServiceError
from .serializers import (
    DashboardResponseSerializer,
    ErrorSerializer,
    PeriodQuerySerializer,
    PeriodSummarySerializer,
)

HOUSEHOLD_PARAMETER = OpenApiParameter(
    'X-Household-ID',
    OpenApiTypes.UUID,
    location=OpenApiParameter.HEADER,
    required=False,
    description="Household to report on. Defaults to the user's first household.",
)


def _actor_for(request):
    household_id = (
        request.META.get(settings.HOUSEHOLD_HEADER)
        or request.query_params.get('household')
    )
    return resolve_actor(user=request.user, household_id=household_id)


@extend_schema(
    parameters=[
        HOUSEHOLD_PARAMETER,
        OpenApiParameter('period', OpenApiTypes.STR, description='Month period (YYYY-MM)'),
    ],
    responses={
        200: PeriodSummarySerializer,
        400: ErrorSerializer,
    },
    description="Get the household's expenses, waste, contributions and budget for one month.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def period_summary(request):
    """Month summary for the acting household - thin HTTP handler."""
    actor = _actor_for(request)

    query_serializer = PeriodQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    period = query_serializer.validated_data.get('period') or timezone.localdate().strftime('%Y-%m')

    try:
        data = ReportingQueries.period_summary(actor.household_id, period)
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(PeriodSummarySerializer(data).data)


@extend_schema(
    parameters=[HOUSEHOLD_PARAMETER],
    responses={200: DashboardResponseSerializer},
    description="Get expiring inventory, bills due soon and the current month summary.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    """Get comprehensive dashboard data for the acting household."""
    actor = _actor_for(request)
    data = ReportingQueries.dashboard(actor.household_id)
    return Response(DashboardResponseSerializer(data).data)
