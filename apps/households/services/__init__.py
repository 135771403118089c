"""
Households app services layer.

Actor resolution for the API and household membership management.
"""

from .actor import (
    Actor,
    resolve_actor,
    is_member,
)

from .household_management import (
    create_household,
    add_member,
    get_household_members,
)


__all__ = [
    # Actor
    'Actor',
    'resolve_actor',
    'is_member',

    # Household management
    'create_household',
    'add_member',
    'get_household_members',
]
