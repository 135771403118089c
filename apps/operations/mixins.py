"""
View mixins for household-scoped endpoints.

``ActorMixin`` resolves who is acting in which household. The household
comes from the ``X-Household-ID`` header or the ``household`` query
parameter, and defaults to the user's first household.

``MutationViewSetMixin`` turns a ``ModelViewSet`` into a household-scoped
one whose create, update and destroy all run through the simple-mutation
operation, so every write is validated and audited the same way.
"""
from django.conf import settings
from rest_framework import status
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from apps.households.services import Actor, resolve_actor
from apps.operations.services import Operation, execute


class HouseholdPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ActorMixin:

    def get_actor(self) -> Actor:
        if getattr(self, '_actor', None) is None:
            household_id = (
                self.request.META.get(settings.HOUSEHOLD_HEADER)
                or self.request.query_params.get('household')
            )
            self._actor = resolve_actor(user=self.request.user, household_id=household_id)
        return self._actor

    def run_operation(self, operation, params):
        return execute(operation, params, self.get_actor())


class MutationViewSetMixin(ActorMixin):
    """
    Household-scoped ModelViewSet writes.

    Subclasses set ``mutation_table`` to the entity table they write and
    ``serializer_class`` to the read serializer used for responses.
    Updates are always partial.
    """

    mutation_table = None
    pagination_class = HouseholdPagination

    def get_queryset(self):
        return super().get_queryset().filter(household_id=self.get_actor().household_id)

    def create(self, request, *args, **kwargs):
        result = self.run_operation(Operation.SIMPLE_MUTATION, {
            'table': self.mutation_table,
            'action': 'create',
            'data': request.data,
        })
        return Response(
            self.get_serializer(result.payload).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        result = self.run_operation(Operation.SIMPLE_MUTATION, {
            'table': self.mutation_table,
            'action': 'update',
            'record_id': self._record_id(),
            'data': request.data,
        })
        return Response(self.get_serializer(result.payload).data)

    def destroy(self, request, *args, **kwargs):
        self.run_operation(Operation.SIMPLE_MUTATION, {
            'table': self.mutation_table,
            'action': 'delete',
            'record_id': self._record_id(),
        })
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _record_id(self):
        return self.kwargs[self.lookup_url_kwarg or self.lookup_field]
