"""
Audit recorder.

Appends one AuditLogEntry per write, inside the caller's transaction.
"""

from typing import Optional
from uuid import UUID

import structlog
from django.db import transaction
from django.db.transaction import TransactionManagementError

from apps.audit.diffs import Diff
from apps.audit.models import AuditLogEntry
from apps.operations.exceptions import NotAuthorizedError

logger = structlog.get_logger(__name__)


def record(
    *,
    household_id: Optional[UUID],
    actor_id: Optional[UUID],
    table: str,
    record_id: UUID,
    diff: Diff
) -> AuditLogEntry:
    """
    Append an audit entry for one write.

    The action is taken from the diff variant and the diff is serialized
    to JSON here, at the storage boundary.

    Args:
        household_id: Household the record belongs to
        actor_id: User performing the write
        table: Entity-table name of the record (e.g. ``inventory``)
        record_id: Primary key of the written record
        diff: Created, Updated or Deleted

    Returns:
        The created AuditLogEntry

    Raises:
        NotAuthorizedError: If household_id or actor_id is missing
        TransactionManagementError: If called outside an atomic block
    """
    if household_id is None or actor_id is None:
        raise NotAuthorizedError('audit entry without actor')

    if not transaction.get_connection().in_atomic_block:
        raise TransactionManagementError(
            'Audit entries must be written inside the transaction of the mutation.'
        )

    entry = AuditLogEntry.objects.create(
        household_id=household_id,
        user_id=actor_id,
        entity_table=table,
        entity_id=record_id,
        action=diff.action,
        diff=diff.to_json(),
    )
    logger.debug(
        'audit_entry_appended',
        table=table,
        record_id=str(record_id),
        action=str(diff.action),
    )
    return entry
