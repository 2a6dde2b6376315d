"""
Service layer unit tests for orders app.

Tests cover:
- Plan cap enforcement and rollback
- Customer resolution and last visit
- Value recomputation and progress-driven status
- Kanban grouping
"""

import pytest
from decimal import Decimal
from uuid import uuid4

from apps.accounts.services import PlanLimitExceededError
from apps.customers.models import Customer
from apps.orders.models import ServiceOrder, Technician, OrderStatus
from apps.orders.services import (
    create_order,
    update_order,
    complete_order,
    delete_order,
    get_order,
    get_account_orders,
    get_kanban_board,
    create_technician,
    delete_technician,
    OrderNotFoundError,
    CustomerNotFoundError,
    InvalidProgressError,
    TechnicianNotFoundError,
)


@pytest.mark.django_db
class TestCreateOrder:

    def test_create_sets_initial_state(self, user):
        order = create_order(
            owner=user,
            customer_name='João Souza',
            device='Moto G8',
            labor_value=Decimal('80.00'),
            parts_value=Decimal('45.50'),
        )

        assert order.status == OrderStatus.RECEIVED
        assert order.progress == 0
        assert order.value == Decimal('125.50')
        assert order.customer is None

    def test_create_links_customer_by_id_and_touches_last_visit(self, user, customer):
        assert customer.last_visit is None

        order = create_order(owner=user, customer_id=customer.id, device='iPad Air')

        customer.refresh_from_db()
        assert order.customer == customer
        assert order.customer_name == 'Maria Silva'
        assert customer.last_visit is not None

    def test_create_links_customer_by_name(self, user, customer):
        order = create_order(owner=user, customer_name='Maria Silva', device='iPad Air')

        assert order.customer == customer

    def test_create_unknown_customer_id(self, user):
        with pytest.raises(CustomerNotFoundError):
            create_order(owner=user, customer_id=uuid4(), device='iPad Air')

        assert ServiceOrder.objects.count() == 0

    def test_create_ignores_customer_of_other_account(self, user, other_user):
        foreign = Customer.objects.create(owner=other_user, name='Maria Silva')

        with pytest.raises(CustomerNotFoundError):
            create_order(owner=user, customer_id=foreign.id, device='iPad Air')

    def test_free_plan_sixth_order_rejected(self, user):
        for i in range(5):
            create_order(owner=user, customer_name=f'Cliente {i}', device='Redmi Note 9')

        with pytest.raises(PlanLimitExceededError):
            create_order(owner=user, customer_name='Cliente 6', device='Redmi Note 9')

        assert ServiceOrder.objects.filter(owner=user).count() == 5

    def test_rejected_order_leaves_customer_untouched(self, user, customer):
        for i in range(5):
            ServiceOrder.objects.create(owner=user, customer_name=f'Cliente {i}', device='X')

        with pytest.raises(PlanLimitExceededError):
            create_order(owner=user, customer_id=customer.id, device='iPad')

        customer.refresh_from_db()
        assert customer.last_visit is None

    def test_pro_plan_has_no_cap(self, pro_user):
        for i in range(7):
            create_order(owner=pro_user, customer_name=f'Cliente {i}', device='Redmi Note 9')

        assert ServiceOrder.objects.filter(owner=pro_user).count() == 7

    def test_limit_is_per_account(self, user, other_user):
        for i in range(5):
            ServiceOrder.objects.create(owner=other_user, customer_name=f'C{i}', device='X')

        order = create_order(owner=user, customer_name='Ana', device='Y')

        assert order.owner == user


@pytest.mark.django_db
class TestUpdateOrder:

    def test_progress_on_received_moves_to_repairing(self, user, order):
        order = update_order(owner=user, order_id=order.id, progress=50)

        assert order.progress == 50
        assert order.status == OrderStatus.REPAIRING

    def test_full_progress_moves_to_ready(self, user, order):
        order.status = OrderStatus.WAITING_PARTS
        order.save()

        order = update_order(owner=user, order_id=order.id, progress=100)

        assert order.status == OrderStatus.READY

    def test_value_recomputed(self, user, order):
        order = update_order(owner=user, order_id=order.id, parts_value=Decimal('20.00'))

        assert order.value == Decimal('170.00')

    def test_invalid_progress(self, user, order):
        with pytest.raises(InvalidProgressError):
            update_order(owner=user, order_id=order.id, progress=120)

        order.refresh_from_db()
        assert order.progress == 0

    def test_other_account_order_not_found(self, user, other_order):
        with pytest.raises(OrderNotFoundError):
            update_order(owner=user, order_id=other_order.id, progress=10)

    def test_complete(self, user, order):
        order = complete_order(owner=user, order_id=order.id)

        assert order.progress == 100
        assert order.status == OrderStatus.READY

    def test_unlink_customer(self, user, order):
        order = update_order(owner=user, order_id=order.id, customer_id=None)

        assert order.customer is None
        assert order.customer_name == 'Maria Silva'

    def test_rename_relinks_to_matching_customer(self, user, order, customer):
        bia = Customer.objects.create(owner=user, name='Bia Souza')

        order = update_order(owner=user, order_id=order.id, customer_name='Bia Souza')

        assert order.customer == bia
        assert customer.service_orders.count() == 0
        assert bia.service_orders.count() == 1

    def test_rename_to_unknown_customer_unlinks(self, user, order):
        order = update_order(owner=user, order_id=order.id, customer_name='Cliente Avulso')

        assert order.customer is None
        assert order.customer_name == 'Cliente Avulso'

    def test_same_name_keeps_link(self, user, order, customer):
        order = update_order(owner=user, order_id=order.id, customer_name='Maria Silva', device='iPad')

        assert order.customer == customer


@pytest.mark.django_db
class TestQueries:

    def test_delete(self, user, order):
        delete_order(owner=user, order_id=order.id)

        with pytest.raises(OrderNotFoundError):
            get_order(owner=user, order_id=order.id)

    def test_filters(self, user, order):
        ServiceOrder.objects.create(
            owner=user, customer_name='Pedro', device='Galaxy A52', status=OrderStatus.READY
        )

        assert list(get_account_orders(owner=user, status=OrderStatus.READY).values_list(
            'customer_name', flat=True)) == ['Pedro']
        assert get_account_orders(owner=user, search='iphone').get() == order
        assert get_account_orders(owner=user, customer_id=order.customer_id).get() == order

    def test_kanban_columns_in_workflow_order(self, user, order):
        ServiceOrder.objects.create(
            owner=user, customer_name='Pedro', device='Galaxy A52', status=OrderStatus.READY
        )

        board = get_kanban_board(owner=user)

        assert [column['status'] for column in board] == [
            'received', 'diagnosis', 'waiting_parts', 'repairing', 'ready'
        ]
        assert board[0]['orders'] == [order]
        assert board[0]['label'] == 'Recebido'
        assert len(board[4]['orders']) == 1
        assert board[1]['orders'] == []


@pytest.mark.django_db
class TestTechnicians:

    def test_create_strips_name(self, user):
        technician = create_technician(owner=user, name='  Carlos  ')

        assert technician.name == 'Carlos'

    def test_delete_other_account_technician(self, other_user, technician):
        with pytest.raises(TechnicianNotFoundError):
            delete_technician(owner=other_user, technician_id=technician.id)

        assert Technician.objects.filter(id=technician.id).exists()
