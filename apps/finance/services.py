"""Fixed expense management service."""

from django.db import transaction
from decimal import Decimal
from uuid import UUID
import logging

from apps.accounts.models import User
from .exceptions import ExpenseNotFoundError
from .models import FixedExpense, ExpenseCategory

logger = logging.getLogger(__name__)

EXPENSE_UPDATABLE_FIELDS = ('category', 'description', 'amount')


def get_expense(*, owner: User, expense_id: UUID) -> FixedExpense:
    """
    Raises:
        ExpenseNotFoundError: If the expense is missing or owned by another account
    """
    try:
        return FixedExpense.objects.get(id=expense_id, owner=owner)
    except FixedExpense.DoesNotExist:
        raise ExpenseNotFoundError("Despesa não encontrada.")


@transaction.atomic
def create_expense(
    *,
    owner: User,
    description: str,
    amount: Decimal,
    category: str = ExpenseCategory.OTHER,
) -> FixedExpense:
    """Register a recurring monthly cost."""
    expense = FixedExpense.objects.create(
        owner=owner,
        category=category,
        description=description,
        amount=amount,
    )
    logger.info("Account %s added fixed expense %s (%s)", owner.id, expense.id, amount)
    return expense


@transaction.atomic
def update_expense(*, owner: User, expense_id: UUID, **changes) -> FixedExpense:
    """Apply a partial update to a fixed expense."""
    expense = get_expense(owner=owner, expense_id=expense_id)

    fields = [name for name in EXPENSE_UPDATABLE_FIELDS if name in changes]
    for name in fields:
        setattr(expense, name, changes[name])

    if fields:
        expense.save(update_fields=fields + ['updated_at'])
    return expense


@transaction.atomic
def delete_expense(*, owner: User, expense_id: UUID) -> None:
    expense = get_expense(owner=owner, expense_id=expense_id)
    expense.delete()
    logger.info("Account %s deleted fixed expense %s", owner.id, expense_id)
