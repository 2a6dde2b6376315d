import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Plan
from apps.customers.models import Customer
from apps.orders.models import ServiceOrder, Technician


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a free-plan shop account."""
    return User.objects.create_user(
        email='shop@example.com',
        password='TestPass123!',
        display_name='Assistência Central',
    )


@pytest.fixture
def pro_user(db):
    """Create and return a Pro shop account."""
    return User.objects.create_user(
        email='proshop@example.com',
        password='TestPass123!',
        plan=Plan.PRO,
    )


@pytest.fixture
def other_user(db):
    """Create and return an unrelated shop account."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return API client authenticated as user."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def customer(user):
    """Create and return a customer of user."""
    return Customer.objects.create(owner=user, name='Maria Silva', cpf='123.456.789-00')


@pytest.fixture
def order(user, customer):
    """Create and return a freshly received order."""
    return ServiceOrder.objects.create(
        owner=user,
        customer=customer,
        customer_name=customer.name,
        device='iPhone 12',
        problem='Tela quebrada',
        labor_value=Decimal('150.00'),
        parts_value=Decimal('100.00'),
        value=Decimal('250.00'),
    )


@pytest.fixture
def other_order(other_user):
    """Create and return an order of another account."""
    return ServiceOrder.objects.create(
        owner=other_user,
        customer_name='Cliente Alheio',
        device='Galaxy S20',
    )


@pytest.fixture
def technician(user):
    return Technician.objects.create(owner=user, name='Carlos')
