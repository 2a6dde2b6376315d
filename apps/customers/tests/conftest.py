import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.customers.models import Customer
from apps.orders.models import ServiceOrder


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
    return Customer.objects.create(owner=user, name='Maria Silva', cpf='123.456.789-00')


@pytest.fixture
def make_orders(user):
    """Create ``count`` orders for a customer, optionally with a status."""

    def _make_orders(customer, count, **fields):
        return [
            ServiceOrder.objects.create(
                owner=user,
                customer=customer,
                customer_name=customer.name,
                device=f'Aparelho {i}',
                **fields
            )
            for i in range(count)
        ]

    return _make_orders
