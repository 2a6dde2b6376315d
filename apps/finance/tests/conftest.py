import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.finance.models import FixedExpense, ExpenseCategory
from apps.orders.models import ServiceOrder


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a shop account."""
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
def order(user):
    """Order worth 150 (100 labor + 50 parts), created now."""
    return ServiceOrder.objects.create(
        owner=user,
        customer_name='Maria Silva',
        device='iPhone 12',
        labor_value=Decimal('100.00'),
        parts_value=Decimal('50.00'),
        value=Decimal('150.00'),
    )


@pytest.fixture
def expense(user):
    return FixedExpense.objects.create(
        owner=user,
        category=ExpenseCategory.RENT,
        description='Aluguel da loja',
        amount=Decimal('80.00'),
    )
