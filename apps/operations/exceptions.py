"""
Domain exceptions for household operations.

Every error raised by the transaction executor, the reconciler and the
audit recorder is an ``OperationError``. They are DRF ``APIException``
subclasses, so a view can let them propagate and DRF answers with the
right status code. ``handlers.operation_exception_handler`` (wired in
settings) renders them as::

    {"error": "<code>", "detail": "<message>", "field": ..., "invariant": ..., "errors": ...}

Exception Hierarchy:
    OperationError (base)
    ├── NotAuthorizedError      403
    ├── ValidationError         400
    ├── InvalidStateError       400
    ├── ConflictError           409
    ├── NotFoundError           404
    ├── NoItemsSelectedError    400
    └── ImmutableRecordError    400
"""
from rest_framework.exceptions import APIException


class OperationError(APIException):
    """Base exception for all operation errors."""
    status_code = 400
    default_detail = 'The operation could not be completed.'
    default_code = 'operation_error'

    def __init__(self, detail=None, *, field=None, invariant=None, errors=None):
        super().__init__(detail)
        self.field = field
        self.invariant = invariant
        self.errors = errors

    @property
    def code(self):
        return self.default_code

    def to_response_data(self):
        data = {'error': self.code, 'detail': str(self.detail)}
        if self.field:
            data['field'] = self.field
        if self.invariant:
            data['invariant'] = self.invariant
        if self.errors:
            data['errors'] = self.errors
        return data


class NotAuthorizedError(OperationError):
    """
    Actor is missing or not a member of the household.

    The response always carries the generic message; the specific reason
    is kept on ``reason`` for logging only.
    """
    status_code = 403
    default_detail = 'You are not allowed to act in this household.'
    default_code = 'not_authorized'

    def __init__(self, reason=None, **kwargs):
        super().__init__(None, **kwargs)
        self.reason = reason


class ValidationError(OperationError):
    """Input failed validation."""
    status_code = 400
    default_detail = 'Invalid input.'
    default_code = 'validation_error'

    @classmethod
    def from_serializer_errors(cls, errors):
        """Build from a DRF serializer ``errors`` mapping, naming the first bad field."""
        field = next(iter(errors), None)
        message = _first_message(errors[field]) if field is not None else None
        if field == 'non_field_errors':
            field = None
        return cls(message, field=field, errors=errors)


class InvalidStateError(OperationError):
    """Record is not in a state that allows the operation."""
    status_code = 400
    default_detail = 'The record is not in a valid state for this operation.'
    default_code = 'invalid_state'


class ConflictError(OperationError):
    """Write would violate a uniqueness or reference rule."""
    status_code = 409
    default_detail = 'The change conflicts with existing data.'
    default_code = 'conflict'


class NotFoundError(OperationError):
    status_code = 404
    default_detail = 'Record not found.'
    default_code = 'not_found'


class NoItemsSelectedError(OperationError):
    status_code = 400
    default_detail = 'No pending shopping list entries were selected.'
    default_code = 'no_items_selected'


class ImmutableRecordError(OperationError):
    status_code = 400
    default_detail = 'Audit log entries cannot be changed or deleted.'
    default_code = 'immutable_record'


def _first_message(value):
    if isinstance(value, dict):
        return _first_message(next(iter(value.values()), None))
    if isinstance(value, (list, tuple)):
        for item in value:
            message = _first_message(item)
            if message:
                return message
        return None
    return str(value) if value else None
