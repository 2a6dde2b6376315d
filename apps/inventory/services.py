"""Stock management service."""

from django.conf import settings
from django.db import transaction
from django.db.models import Q, QuerySet
from decimal import Decimal
from typing import Optional
from uuid import UUID
import logging

from apps.accounts.models import User
from .exceptions import InventoryItemNotFoundError
from .models import InventoryItem, StockStatus

logger = logging.getLogger(__name__)

DEFAULT_MODEL = 'Geral'
ITEM_UPDATABLE_FIELDS = ('name', 'model', 'quantity', 'unit_cost')


def get_account_items(
    *,
    owner: User,
    search: str = '',
    status: Optional[str] = None,
) -> QuerySet:
    """
    Account's stock in name order.

    Args:
        owner: The account
        search: Case-insensitive match on name or model
        status: StockStatus value; low stock means quantity below
            ``settings.LOW_STOCK_THRESHOLD``
    """
    queryset = InventoryItem.objects.filter(owner=owner)

    if search:
        queryset = queryset.filter(Q(name__icontains=search) | Q(model__icontains=search))

    threshold = settings.LOW_STOCK_THRESHOLD
    if status == StockStatus.LOW_STOCK:
        queryset = queryset.filter(quantity__lt=threshold)
    elif status == StockStatus.AVAILABLE:
        queryset = queryset.filter(quantity__gte=threshold)

    return queryset.order_by('name')


def get_item(*, owner: User, item_id: UUID) -> InventoryItem:
    """
    Raises:
        InventoryItemNotFoundError: If the item is missing or owned by another account
    """
    try:
        return InventoryItem.objects.get(id=item_id, owner=owner)
    except InventoryItem.DoesNotExist:
        raise InventoryItemNotFoundError("Item não encontrado.")


@transaction.atomic
def create_item(
    *,
    owner: User,
    name: str,
    model: str = '',
    quantity: int = 0,
    unit_cost: Decimal = Decimal('0.00'),
) -> InventoryItem:
    """Add a part to stock. An empty model is stored as 'Geral'."""
    item = InventoryItem.objects.create(
        owner=owner,
        name=name.strip(),
        model=(model or '').strip() or DEFAULT_MODEL,
        quantity=quantity or 0,
        unit_cost=unit_cost or Decimal('0.00'),
    )
    logger.info("Account %s added inventory item %s (qty=%s)", owner.id, item.id, item.quantity)
    return item


@transaction.atomic
def update_item(*, owner: User, item_id: UUID, **changes) -> InventoryItem:
    """Apply a partial update; the stock status follows the new quantity."""
    try:
        item = InventoryItem.objects.select_for_update().get(id=item_id, owner=owner)
    except InventoryItem.DoesNotExist:
        raise InventoryItemNotFoundError("Item não encontrado.")

    fields = [name for name in ITEM_UPDATABLE_FIELDS if name in changes]
    for name in fields:
        value = changes[name]
        if name == 'model':
            value = (value or '').strip() or DEFAULT_MODEL
        setattr(item, name, value)

    if fields:
        item.save(update_fields=fields + ['updated_at'])
    return item


@transaction.atomic
def delete_item(*, owner: User, item_id: UUID) -> None:
    item = get_item(owner=owner, item_id=item_id)
    item.delete()
    logger.info("Account %s deleted inventory item %s", owner.id, item_id)
