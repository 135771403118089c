"""
Transaction executor.

``execute`` is the single entry point for every mutation in a household.
It runs an operation as one atomic unit:

1. The actor must be a member of the household (``NotAuthorizedError``).
2. ``params`` are validated by the operation's params serializer
   (``ValidationError``). Nothing has been written yet.
3. A ``transaction.atomic()`` block opens and the operation's handler runs
   against a ``UnitOfWork``, which appends one audit entry per write.
4. The block commits, or rolls back every write (audit entries included)
   when any exception escapes.

Example::

    from apps.operations.services import execute, Operation

    result = execute(
        Operation.BILL_SETTLEMENT,
        {'bill_id': bill.id, 'amount': '42.00'},
        actor,
    )
    result.payload['expense']   # the derived Expense
    result.audit_entries        # three AuditLogEntry rows
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional
from uuid import UUID

import structlog
from django.db import models, transaction

from apps.audit.diffs import Created, Deleted, Diff, Updated, snapshot
from apps.audit.models import AuditLogEntry
from apps.audit.services import recorder
from apps.groceries.models import InventoryRecord
from apps.groceries.services.reconciler import reconcile
from apps.households.services.actor import Actor, is_member
from apps.operations.exceptions import (
    NotAuthorizedError,
    OperationError,
    ValidationError,
)

from . import (
    bill_settlement,
    purchase_intake,
    shopping_list_promotion,
    simple_mutation,
    waste_recording,
)

logger = structlog.get_logger(__name__)


class Operation(models.TextChoices):
    PURCHASE_INTAKE = 'purchase_intake', 'Purchase intake'
    BILL_SETTLEMENT = 'bill_settlement', 'Bill settlement'
    SHOPPING_LIST_PROMOTION = 'shopping_list_promotion', 'Shopping list promotion'
    SIMPLE_MUTATION = 'simple_mutation', 'Simple mutation'
    WASTE_RECORDING = 'waste_recording', 'Waste recording'


# Each handler module exposes ``ParamsSerializer`` and ``run(unit, params)``
HANDLERS = {
    Operation.PURCHASE_INTAKE: purchase_intake,
    Operation.BILL_SETTLEMENT: bill_settlement,
    Operation.SHOPPING_LIST_PROMOTION: shopping_list_promotion,
    Operation.SIMPLE_MUTATION: simple_mutation,
    Operation.WASTE_RECORDING: waste_recording,
}


@dataclass
class OperationResult:
    operation: Operation
    payload: Any
    audit_entries: List[AuditLogEntry] = field(default_factory=list)


class UnitOfWork:
    """
    Writes of one operation, audited as they happen.

    Handlers perform their inserts, updates and deletes and report each
    one here; every report appends an AuditLogEntry in the same
    transaction. The entity table of an instance is its ``db_table``.
    """

    def __init__(self, actor: Actor):
        self.actor = actor
        self.audit_entries: List[AuditLogEntry] = []

    @property
    def household_id(self) -> UUID:
        return self.actor.household_id

    @property
    def user_id(self) -> UUID:
        return self.actor.user_id

    def record(self, table: str, record_id: UUID, diff: Diff) -> AuditLogEntry:
        entry = recorder.record(
            household_id=self.household_id,
            actor_id=self.user_id,
            table=table,
            record_id=record_id,
            diff=diff,
        )
        self.audit_entries.append(entry)
        return entry

    def created(self, instance) -> AuditLogEntry:
        return self.record(
            instance._meta.db_table,
            instance.pk,
            Created(snapshot(instance)),
        )

    def updated(self, instance, before: dict) -> AuditLogEntry:
        return self.record(
            instance._meta.db_table,
            instance.pk,
            Updated(before, snapshot(instance)),
        )

    def deleted(self, table: str, record_id: UUID, before: dict) -> AuditLogEntry:
        return self.record(table, record_id, Deleted(before))

    def reconcile(
        self,
        *,
        item_id: UUID,
        quantity: int,
        unit: Optional[str] = None,
        cost_delta: Optional[Decimal] = None
    ) -> InventoryRecord:
        """Merge stock for an item and audit the resulting create or update."""
        result = reconcile(
            household_id=self.household_id,
            item_id=item_id,
            delta_quantity=quantity,
            actor_id=self.user_id,
            unit=unit,
            cost_delta=cost_delta,
        )
        self.record(InventoryRecord._meta.db_table, result.record.pk, result.diff)
        return result.record


def execute(operation, params, actor: Optional[Actor]) -> OperationResult:
    """
    Run an operation atomically on behalf of ``actor``.

    Args:
        operation: An ``Operation`` member or its string value
        params: Raw operation parameters (dict or QueryDict)
        actor: The acting user and household

    Returns:
        OperationResult with the handler's payload and the audit entries
        written

    Raises:
        OperationError: Any subclass; nothing is committed when raised
    """
    operation = Operation(operation)
    handler = HANDLERS[operation]

    try:
        _authorize(actor)

        serializer = handler.ParamsSerializer(data=params)
        if not serializer.is_valid():
            raise ValidationError.from_serializer_errors(serializer.errors)

        with transaction.atomic():
            unit = UnitOfWork(actor)
            payload = handler.run(unit, serializer.validated_data)
    except OperationError as exc:
        logger.warning(
            'operation_rejected',
            operation=operation.value,
            error=exc.code,
            field=exc.field,
            invariant=exc.invariant,
        )
        raise
    except Exception as exc:
        logger.error(
            'operation_rejected',
            operation=operation.value,
            error=type(exc).__name__,
            exc_info=True,
        )
        raise

    logger.info(
        'operation_committed',
        operation=operation.value,
        household_id=str(actor.household_id),
        user_id=str(actor.user_id),
        writes=len(unit.audit_entries),
    )
    return OperationResult(
        operation=operation,
        payload=payload,
        audit_entries=unit.audit_entries,
    )


def _authorize(actor: Optional[Actor]) -> None:
    if actor is None or actor.user_id is None or actor.household_id is None:
        raise NotAuthorizedError('missing actor')
    if not is_member(user_id=actor.user_id, household_id=actor.household_id):
        raise NotAuthorizedError('not a member of the household')
