"""
Financial Aggregation
=====================

Pure functions turning snapshots of service orders and fixed expenses
into revenue, cost and profit figures.

Inputs are any iterables of records: model instances or plain mappings.
Mappings may use either the snake_case field names (``labor_value``) or
the camelCase keys of the JSON payloads (``laborValue``). A missing or
``None`` numeric field counts as zero. All totals are ``Decimal``.

Definitions:
    - gross revenue: sum of ``value``
    - labor revenue: sum of ``labor_value``
    - parts investment: sum of ``parts_value``
    - fixed expenses: sum of ``amount``
    - real profit: labor revenue minus fixed expenses (may be negative;
      parts are pass-through reinvestment and never count as profit)

Example:
    Summarizing a month::

        from apps.finance.aggregation import summarize

        summary = summarize(orders, expenses, month='2024-05')
        print(summary['real_profit'])
"""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
import re

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from .exceptions import InvalidPeriodError

ZERO = Decimal('0.00')
MONTH_PATTERN = re.compile(r'^(\d{4})-(0[1-9]|1[0-2])$')

# Fixed expenses carry no month of their own: they recur every month, so a
# month-scoped report charges their full total once.
EXPENSES_SCOPE_ALL_TIME = 'all_time'
EXPENSES_SCOPE_MONTHLY_RECURRING = 'monthly_recurring'

_CAMEL_CASE = {
    'labor_value': 'laborValue',
    'parts_value': 'partsValue',
    'created_at': 'createdAt',
}


def _field(record, name):
    if isinstance(record, Mapping):
        if name in record:
            return record[name]
        return record.get(_CAMEL_CASE.get(name, name))
    return getattr(record, name, None)


def field_amount(record, name):
    value = _field(record, name)
    if value is None or value == '':
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _sum(records, name):
    return sum((field_amount(record, name) for record in records), ZERO)


def to_local_date(value):
    """
    Return the calendar date of a timestamp in the active time zone.

    Accepts datetimes (aware ones are converted to local time), dates, and
    ISO-8601 strings (``'2024-05-01'`` or ``'2024-05-01T13:45:00Z'``).
    Returns None for empty or unparseable values.
    """
    if value is None or value == '':
        return None
    if isinstance(value, str):
        try:
            parsed = parse_datetime(value) or parse_date(value)
        except ValueError:
            return None
        if parsed is None:
            return None
        value = parsed
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    if isinstance(value, date):
        return value
    return None


def order_date(order):
    return to_local_date(_field(order, 'created_at'))


def total_gross_revenue(orders):
    return _sum(orders, 'value')


def total_labor_revenue(orders):
    return _sum(orders, 'labor_value')


def total_parts_investment(orders):
    return _sum(orders, 'parts_value')


def total_fixed_expenses(expenses):
    return _sum(expenses, 'amount')


def real_profit(orders, expenses):
    """Labor revenue minus fixed expenses."""
    return total_labor_revenue(orders) - total_fixed_expenses(expenses)


def percentage(amount, gross_revenue):
    """Share of gross revenue in percent; 0 when there is no revenue."""
    gross_revenue = Decimal(str(gross_revenue or 0))
    if gross_revenue == 0:
        return ZERO
    return Decimal(str(amount or 0)) / gross_revenue * 100


def parse_month(month):
    """
    Validate a ``YYYY-MM`` string and return ``(year, month)``.

    Raises:
        InvalidPeriodError: If the string is not a valid month
    """
    match = MONTH_PATTERN.match(month or '')
    if not match:
        raise InvalidPeriodError("Período inválido. Use AAAA-MM")
    return int(match.group(1)), int(match.group(2))


def filter_orders_by_month(orders, month):
    """Keep the orders created in the given ``YYYY-MM`` calendar month."""
    year, month_number = parse_month(month)
    selected = []
    for order in orders:
        created = order_date(order)
        if created is not None and created.year == year and created.month == month_number:
            selected.append(order)
    return selected


def summarize(orders, expenses, month=None):
    """
    Compute every dashboard figure from one snapshot.

    Args:
        orders: Iterable of service orders.
        expenses: Iterable of fixed expenses.
        month (str, optional): ``YYYY-MM``. When given, only orders created
            in that month are aggregated; fixed expenses are charged in
            full as the month's recurring costs.

    Returns:
        dict: gross/labor/parts/fixed totals, real profit, the share of
        gross revenue taken by profit, parts and expenses, the number of
        orders aggregated, the month, and the expense scope applied.

    Raises:
        InvalidPeriodError: If ``month`` is malformed
    """
    orders = list(orders)
    expenses = list(expenses)

    if month:
        orders = filter_orders_by_month(orders, month)
        expenses_scope = EXPENSES_SCOPE_MONTHLY_RECURRING
    else:
        expenses_scope = EXPENSES_SCOPE_ALL_TIME

    gross = total_gross_revenue(orders)
    labor = total_labor_revenue(orders)
    parts = total_parts_investment(orders)
    fixed = total_fixed_expenses(expenses)
    profit = labor - fixed

    return {
        'total_gross_revenue': gross,
        'total_labor_revenue': labor,
        'total_parts_investment': parts,
        'total_fixed_expenses': fixed,
        'real_profit': profit,
        'real_profit_percentage': percentage(profit, gross),
        'parts_percentage': percentage(parts, gross),
        'fixed_expenses_percentage': percentage(fixed, gross),
        'orders_count': len(orders),
        'month': month,
        'expenses_scope': expenses_scope,
    }
