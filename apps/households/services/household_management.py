"""
Household management service.

Creates households and manages who belongs to them.
"""

from typing import List
from uuid import UUID

import structlog
from django.db import transaction

from apps.accounts.models import User
from apps.households.models import Household, HouseholdMembership, HouseholdRole
from apps.operations.exceptions import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
)

logger = structlog.get_logger(__name__)


@transaction.atomic
def create_household(*, name: str, owner: User) -> Household:
    """
    Create a household and add the creator as its owner.

    Args:
        name: Household name
        owner: User who creates and owns the household

    Returns:
        Created Household instance
    """
    household = Household.objects.create(name=name, created_by=owner)
    HouseholdMembership.objects.create(
        user=owner,
        household=household,
        role=HouseholdRole.OWNER
    )
    logger.info('household_created', household_id=str(household.id), user_id=str(owner.id))
    return household


@transaction.atomic
def add_member(*, household_id: UUID, email: str, added_by: User) -> HouseholdMembership:
    """
    Add an existing user to a household. Only owners may add members.

    Raises:
        NotAuthorizedError: If ``added_by`` is not an owner of the household
        NotFoundError: If no user has the given email
        ConflictError: If the user is already a member
    """
    household = Household.objects.select_for_update().filter(id=household_id).first()
    if household is None or household.get_user_role(added_by) != HouseholdRole.OWNER:
        raise NotAuthorizedError('only owners can add members')

    try:
        user = User.objects.get(email__iexact=email)
    except User.DoesNotExist:
        raise NotFoundError('User not found.', field='email')

    if household.has_member(user):
        raise ConflictError(
            'User is already a member of this household.',
            field='email',
            invariant='membership_unique',
        )

    membership = HouseholdMembership.objects.create(
        user=user,
        household=household,
        role=HouseholdRole.MEMBER
    )
    logger.info('household_member_added', household_id=str(household.id), user_id=str(user.id))
    return membership


def get_household_members(*, household_id: UUID) -> List[HouseholdMembership]:
    return list(
        HouseholdMembership.objects
        .filter(household_id=household_id)
        .select_related('user')
    )
