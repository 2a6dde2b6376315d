import pytest
from decimal import Decimal
from uuid import uuid4
from django.test import override_settings

from apps.inventory.exceptions import InventoryItemNotFoundError
from apps.inventory.models import InventoryItem, StockStatus, stock_status
from apps.inventory.services import (
    create_item,
    update_item,
    delete_item,
    get_item,
    get_account_items,
)


class TestStockStatus:

    @pytest.mark.parametrize('quantity, expected', [
        (0, StockStatus.LOW_STOCK),
        (2, StockStatus.LOW_STOCK),
        (3, StockStatus.AVAILABLE),
        (40, StockStatus.AVAILABLE),
    ])
    def test_threshold(self, quantity, expected):
        assert stock_status(quantity) == expected

    def test_labels(self):
        assert StockStatus.LOW_STOCK.label == 'Estoque Baixo'
        assert StockStatus.AVAILABLE.label == 'Disponível'

    @override_settings(LOW_STOCK_THRESHOLD=10)
    def test_threshold_from_settings(self):
        assert stock_status(5) == StockStatus.LOW_STOCK


@pytest.mark.django_db
class TestInventoryServices:

    def test_create_quantity_two_is_low_stock(self, user):
        item = create_item(owner=user, name='Bateria Moto G', quantity=2, unit_cost=Decimal('35.00'))

        assert item.get_status_display() == 'Estoque Baixo'

    def test_create_quantity_three_is_available(self, user):
        item = create_item(owner=user, name='Bateria Moto G', quantity=3, unit_cost=Decimal('35.00'))

        assert item.get_status_display() == 'Disponível'

    def test_create_default_model(self, user):
        item = create_item(owner=user, name='Cabo USB-C')

        assert item.model == 'Geral'
        assert item.quantity == 0

    def test_status_follows_quantity_update(self, user, item):
        assert item.status == StockStatus.AVAILABLE

        item = update_item(owner=user, item_id=item.id, quantity=1)

        assert item.status == StockStatus.LOW_STOCK
        assert InventoryItem.objects.get(id=item.id).quantity == 1

    def test_total_cost(self, item):
        assert item.total_cost == Decimal('600.00')

    def test_search_name_or_model(self, user, item):
        create_item(owner=user, name='Conector de carga', model='Samsung A10', quantity=4)

        assert [i.name for i in get_account_items(owner=user, search='incell')] == ['Tela iPhone 11']
        assert [i.name for i in get_account_items(owner=user, search='samsung')] == ['Conector de carga']

    def test_status_filter(self, user, item):
        create_item(owner=user, name='Alto-falante', quantity=1)

        low = get_account_items(owner=user, status=StockStatus.LOW_STOCK)

        assert [i.name for i in low] == ['Alto-falante']

    def test_other_account_item(self, other_user, item):
        with pytest.raises(InventoryItemNotFoundError):
            get_item(owner=other_user, item_id=item.id)

    def test_delete(self, user, item):
        delete_item(owner=user, item_id=item.id)

        assert not InventoryItem.objects.filter(id=item.id).exists()

    def test_delete_missing(self, user):
        with pytest.raises(InventoryItemNotFoundError):
            delete_item(owner=user, item_id=uuid4())
