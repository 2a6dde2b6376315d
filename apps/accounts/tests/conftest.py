import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Plan


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a free-plan test user."""
    return User.objects.create_user(
        email='test@example.com',
        password='TestPass123!',
        display_name='Test User',
    )


@pytest.fixture
def pro_user(db):
    """Create and return a Pro test user."""
    return User.objects.create_user(
        email='pro@example.com',
        password='TestPass123!',
        display_name='Pro User',
        plan=Plan.PRO,
    )


@pytest.fixture
def inactive_user(db):
    """Create and return a deactivated user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        is_active=False,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return API client authenticated as user."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
