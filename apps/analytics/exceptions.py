"""
Domain exceptions for analytics app.

Exception Hierarchy:
    AnalyticsServiceError (base)
    └── InvalidDateRangeError
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

        try:
            data = build_report(company=company, start=start, end=end)
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidDateRangeError(AnalyticsServiceError):
    """
    Raised when date range is invalid.

    Typically when start_date is after end_date.
    """

    pass
