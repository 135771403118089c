from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
import uuid

from apps.operations.exceptions import ImmutableRecordError


class AuditAction(models.TextChoices):
    CREATE = 'create', 'Create'
    UPDATE = 'update', 'Update'
    DELETE = 'delete', 'Delete'


class AuditLogQuerySet(models.QuerySet):
    """Append-only queryset: bulk update and delete are refused."""

    def update(self, **kwargs):
        raise ImmutableRecordError()

    def delete(self):
        raise ImmutableRecordError()


class AuditLogEntry(models.Model):
    """One recorded mutation of one household record."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    household = models.ForeignKey(
        'households.Household',
        on_delete=models.PROTECT,
        related_name='audit_entries'
    )
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='audit_entries'
    )
    entity_table = models.CharField(max_length=50)
    entity_id = models.UUIDField()
    action = models.CharField(max_length=10, choices=AuditAction.choices)
    diff = models.JSONField(encoder=DjangoJSONEncoder)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = AuditLogQuerySet.as_manager()

    class Meta:
        db_table = 'audit_logs'
        indexes = [
            models.Index(fields=['household', 'created_at'], name='audit_household_created_idx'),
            models.Index(fields=['entity_table', 'entity_id'], name='audit_entity_idx'),
        ]
        ordering = ['-created_at']
        verbose_name_plural = 'audit log entries'

    def __str__(self):
        return f"{self.action} {self.entity_table}/{self.entity_id}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ImmutableRecordError()
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ImmutableRecordError()
