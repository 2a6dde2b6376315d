"""
Finance Reports
===============

Builds the financial dashboard of one account from its current orders
and fixed expenses. Each call loads a full snapshot of the account's
records and recomputes every figure with the pure functions of
:mod:`apps.finance.aggregation` and :mod:`apps.finance.timeseries`.

Classes:
    FinanceReports: Static methods for the summary, weekly chart and dashboard.

Example:
    Monthly summary::

        from apps.finance.reports import FinanceReports

        summary = FinanceReports.summary(request.user, month='2024-05')
        print(summary['real_profit'])

Note:
    Read-only. Methods return plain dictionaries ready for JSON output.
"""

from decimal import Decimal, ROUND_HALF_UP

from apps.orders.models import ServiceOrder
from .aggregation import summarize
from .formatting import format_brl
from .models import FixedExpense
from .timeseries import weekly_labor_series

RECENT_ORDERS_LIMIT = 5

_MONEY_FIELDS = (
    'total_gross_revenue',
    'total_labor_revenue',
    'total_parts_investment',
    'total_fixed_expenses',
    'real_profit',
)

_PERCENTAGE_FIELDS = (
    'real_profit_percentage',
    'parts_percentage',
    'fixed_expenses_percentage',
)


def _round(value, places):
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


class FinanceReports:
    """
    Financial figures for the dashboard and finance pages.

    Methods:
        summary: Revenue, costs, real profit and percentage breakdown.
        weekly: Seven-day labor revenue series.
        dashboard: Summary, weekly series and the latest orders together.
    """

    @staticmethod
    def _orders(owner):
        return ServiceOrder.objects.filter(owner=owner)

    @staticmethod
    def _expenses(owner):
        return FixedExpense.objects.filter(owner=owner)

    @staticmethod
    def summary(owner, month=None):
        """
        Compute the account's financial summary.

        Args:
            owner (User): The account.
            month (str, optional): ``YYYY-MM`` to restrict orders to one
                month. Fixed expenses are recurring monthly costs and are
                charged in full.

        Returns:
            dict: Totals rounded to cents, percentages rounded to one
            decimal place, plus a ``formatted`` dict with the totals as
            ``'R$ 1.234,56'`` strings.

        Raises:
            InvalidPeriodError: If ``month`` is malformed
        """
        data = summarize(
            FinanceReports._orders(owner),
            FinanceReports._expenses(owner),
            month=month,
        )

        for name in _MONEY_FIELDS:
            data[name] = _round(data[name], 2)
        for name in _PERCENTAGE_FIELDS:
            data[name] = _round(data[name], 1)

        data['formatted'] = {name: format_brl(data[name]) for name in _MONEY_FIELDS}
        return data

    @staticmethod
    def weekly(owner, today=None):
        """Labor revenue per day for the trailing seven days, oldest first."""
        return weekly_labor_series(FinanceReports._orders(owner), today=today)

    @staticmethod
    def dashboard(owner, today=None):
        """Summary, weekly chart and the five most recent orders."""
        orders = FinanceReports._orders(owner)
        return {
            'summary': FinanceReports.summary(owner),
            'weekly': FinanceReports.weekly(owner, today=today),
            'recent_orders': list(orders.order_by('-created_at')[:RECENT_ORDERS_LIMIT]),
        }
