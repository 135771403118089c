"""
Domain exceptions for analytics app.

This module defines domain-specific exceptions that are raised by the
reporting queries. They represent invalid reporting requests, separate
from HTTP concerns.

Exception Hierarchy:
    AnalyticsServiceError (base)
    └── InvalidPeriodError

Usage:
    from apps.analytics.exceptions import InvalidPeriodError

    if not PERIOD_PATTERN.match(period):
        raise InvalidPeriodError("Invalid period format. Use YYYY-MM")
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

    Views catch it and answer with HTTP 400::

        try:
            data = ReportingQueries.period_summary(household_id, period)
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidPeriodError(AnalyticsServiceError):
    """
    Raised when period format is invalid.

    Period must be in YYYY-MM format (e.g., '2025-01').
    """

    pass
