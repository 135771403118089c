from rest_framework.views import exception_handler

from .exceptions import OperationError


def operation_exception_handler(exc, context):
    """DRF exception handler that renders OperationError in the operation error shape."""
    response = exception_handler(exc, context)
    if response is not None and isinstance(exc, OperationError):
        response.data = exc.to_response_data()
    return response
