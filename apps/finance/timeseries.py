"""Seven-day labor revenue series for the dashboard chart."""

from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from .aggregation import order_date, field_amount
from .formatting import format_date_br

# Indexed Sunday-first
WEEKDAY_LABELS = ('Dom', 'Seg', 'Ter', 'Qua', 'Qui', 'Sex', 'Sab')

SERIES_DAYS = 7


def weekday_label(day):
    """Short Portuguese weekday name (``date.weekday()`` is Monday-first)."""
    return WEEKDAY_LABELS[(day.weekday() + 1) % 7]


def weekly_labor_series(orders, today=None):
    """
    Labor revenue per day for the trailing week ending today.

    Args:
        orders: Iterable of service orders (instances or mappings).
        today (date, optional): Last day of the series. Defaults to the
            current date in the active time zone.

    Returns:
        list[dict]: Exactly seven buckets, oldest first, each containing:
            - name (str): weekday label ('Dom' ... 'Sab').
            - date (date): the bucket's calendar day.
            - full_date (str): 'dd/mm/yyyy'.
            - value (Decimal): sum of labor_value of orders created that day.
            - is_today (bool): True only for the last bucket.
    """
    if today is None:
        today = timezone.localdate()

    start = today - timedelta(days=SERIES_DAYS - 1)
    totals = {start + timedelta(days=offset): Decimal('0.00') for offset in range(SERIES_DAYS)}

    for order in orders:
        created = order_date(order)
        if created in totals:
            totals[created] += field_amount(order, 'labor_value')

    return [
        {
            'name': weekday_label(day),
            'date': day,
            'full_date': format_date_br(day),
            'value': value,
            'is_today': day == today,
        }
        for day, value in sorted(totals.items())
    ]
