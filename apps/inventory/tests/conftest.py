import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.inventory.models import InventoryItem


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
def item(user):
    return InventoryItem.objects.create(
        owner=user,
        name='Tela iPhone 11',
        model='Incell',
        quantity=5,
        unit_cost=Decimal('120.00'),
    )
