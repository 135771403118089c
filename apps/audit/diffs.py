"""
Audit diffs.

A diff is one of three variants describing a single write:

    Created(record)       a row was inserted
    Updated(old, new)     a row changed from ``old`` to ``new``
    Deleted(record)       a row was removed

Records are snapshots taken with ``snapshot()`` at the moment of the
write: JSON-native dicts of every concrete field keyed by attribute name,
so later changes to the model instance never leak into the audit trail.
"""

import json
from dataclasses import dataclass
from typing import ClassVar, Union

from django.core.serializers.json import DjangoJSONEncoder

from .models import AuditAction


def snapshot(instance) -> dict:
    """Return a JSON-native copy of the instance's concrete fields."""
    data = {
        field.attname: getattr(instance, field.attname)
        for field in instance._meta.concrete_fields
    }
    return json.loads(json.dumps(data, cls=DjangoJSONEncoder))


@dataclass(frozen=True)
class Created:
    record: dict
    action: ClassVar[str] = AuditAction.CREATE

    def to_json(self) -> dict:
        return self.record


@dataclass(frozen=True)
class Updated:
    old: dict
    new: dict
    action: ClassVar[str] = AuditAction.UPDATE

    def to_json(self) -> dict:
        return {'old': self.old, 'new': self.new}


@dataclass(frozen=True)
class Deleted:
    record: dict
    action: ClassVar[str] = AuditAction.DELETE

    def to_json(self) -> dict:
        return self.record


Diff = Union[Created, Updated, Deleted]
