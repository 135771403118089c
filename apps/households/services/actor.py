"""
Actor resolution.

Every household operation runs on behalf of an ``Actor``: the acting user
and the household they act in. Views resolve it once from the
authenticated request and pass it explicitly into the executor.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from apps.households.models import HouseholdMembership
from apps.operations.exceptions import NotAuthorizedError


@dataclass(frozen=True)
class Actor:
    user_id: Optional[UUID]
    household_id: Optional[UUID]


def resolve_actor(*, user, household_id=None) -> Actor:
    """
    Map an authenticated user and an optional household id to an Actor.

    Without a household id the user's earliest membership is used.

    Raises:
        NotAuthorizedError: If the user is anonymous, the id is malformed,
            or the user is not a member of the household.
    """
    if user is None or not user.is_authenticated:
        raise NotAuthorizedError('anonymous user')

    memberships = HouseholdMembership.objects.filter(user=user)
    if household_id:
        try:
            household_id = UUID(str(household_id))
        except ValueError:
            raise NotAuthorizedError('malformed household id')
        memberships = memberships.filter(household_id=household_id)

    membership = memberships.order_by('joined_at').first()
    if membership is None:
        raise NotAuthorizedError('no household membership')

    return Actor(user_id=user.id, household_id=membership.household_id)


def is_member(*, user_id, household_id) -> bool:
    return HouseholdMembership.objects.filter(
        user_id=user_id,
        household_id=household_id
    ).exists()
