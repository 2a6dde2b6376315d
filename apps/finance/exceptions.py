"""
Domain exceptions for finance app.

Exception Hierarchy:
    FinanceServiceError (base)
    ├── InvalidPeriodError
    └── ExpenseNotFoundError

Usage:
    from apps.finance.exceptions import InvalidPeriodError

    if not MONTH_PATTERN.match(month):
        raise InvalidPeriodError("Período inválido. Use AAAA-MM")
"""


class FinanceServiceError(Exception):
    """
    Base exception for all finance service errors.

    Views catch this to answer 400 instead of letting a report crash:

        try:
            data = FinanceReports.summary(request.user, month=month)
        except FinanceServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidPeriodError(FinanceServiceError):
    """
    Raised when a reporting month is not in YYYY-MM format.

    Example:
        raise InvalidPeriodError("Período inválido. Use AAAA-MM")
    """

    pass


class ExpenseNotFoundError(FinanceServiceError):
    """Fixed expense does not exist or belongs to another account."""

    pass
