"""Brazilian display formats for money and dates."""

from decimal import Decimal, ROUND_HALF_UP

MONTH_ABBREVIATIONS = (
    'jan', 'fev', 'mar', 'abr', 'mai', 'jun',
    'jul', 'ago', 'set', 'out', 'nov', 'dez',
)


def format_brl(amount):
    """
    Format an amount as Brazilian reais.

    Two decimal places, ``.`` as thousands separator and ``,`` as decimal
    separator: ``Decimal('1234.5')`` -> ``'R$ 1.234,50'``,
    ``Decimal('-20')`` -> ``'-R$ 20,00'``.
    """
    value = Decimal(str(amount or 0)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    sign = '-' if value < 0 else ''
    integer, _, cents = f"{abs(value):,.2f}".partition('.')
    return f"{sign}R$ {integer.replace(',', '.')},{cents}"


def format_date_br(value):
    """``date(2024, 5, 1)`` -> ``'01/05/2024'``."""
    return value.strftime('%d/%m/%Y')


def format_short_date_br(value):
    """Day and abbreviated month: ``date(2024, 10, 9)`` -> ``'09 de out.'``."""
    return f"{value.day:02d} de {MONTH_ABBREVIATIONS[value.month - 1]}."
