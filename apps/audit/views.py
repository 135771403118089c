from rest_framework import viewsets
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.operations.mixins import ActorMixin
from .models import AuditLogEntry
from .serializers import AuditLogEntrySerializer, AuditFilterSerializer


class AuditPagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


@extend_schema_view(list=extend_schema(parameters=[AuditFilterSerializer], tags=['audit']))
class AuditLogViewSet(ActorMixin, viewsets.ReadOnlyModelViewSet):
    """
    Read-only audit trail of the current household.

    Filter with ?entity_table=, ?entity_id= and ?action=.
    """

    serializer_class = AuditLogEntrySerializer
    permission_classes = [IsAuthenticated]
    pagination_class = AuditPagination

    def get_queryset(self):
        actor = self.get_actor()
        queryset = AuditLogEntry.objects.filter(household_id=actor.household_id)

        filter_serializer = AuditFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'entity_table' in params:
            queryset = queryset.filter(entity_table=params['entity_table'])
        if 'entity_id' in params:
            queryset = queryset.filter(entity_id=params['entity_id'])
        if 'action' in params:
            queryset = queryset.filter(action=params['action'])

        return queryset
