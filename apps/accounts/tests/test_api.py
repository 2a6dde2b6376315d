import pytest
from django.conf import settings
from django.urls import reverse
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Plan
from apps.orders.models import ServiceOrder


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client):
        """Successfully register a new account on the free plan."""
        url = reverse('users:register')
        data = {
            'email': 'newshop@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'display_name': 'Assistência Central',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['plan'] == Plan.FREE
        assert User.objects.filter(email='newshop@example.com').exists()

    def test_register_without_display_name(self, api_client):
        """Display name is optional."""
        url = reverse('users:register')
        data = {
            'email': 'minimal@example.com',
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED

    def test_register_duplicate_email(self, api_client, user):
        """Existing email answers with the email-already-in-use message."""
        url = reverse('users:register')
        data = {
            'email': user.email,
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'email-already-in-use'
        assert response.data['error'] == 'Este e-mail já está em uso.'

    def test_register_duplicate_email_case_insensitive(self, api_client, user):
        url = reverse('users:register')
        data = {
            'email': user.email.upper(),
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'email-already-in-use'

    def test_register_weak_password(self, api_client):
        """Password shorter than six characters is rejected."""
        url = reverse('users:register')
        data = {
            'email': 'weak@example.com',
            'password': 'x9!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'weak-password'
        assert response.data['error'] == 'A senha deve ter pelo menos 6 caracteres.'
        assert not User.objects.filter(email='weak@example.com').exists()

    def test_register_password_mismatch(self, api_client):
        url = reverse('users:register')
        data = {
            'email': 'mismatch@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'Different123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data

    def test_register_invalid_email(self, api_client):
        url = reverse('users:register')
        response = api_client.post(url, {'email': 'not-an-email', 'password': 'SecurePass123!'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'email' in response.data


# =============================================================================
# Login / Logout Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {'email': 'test@example.com', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['email'] == user.email

        user.refresh_from_db()
        assert user.last_login is not None

    def test_login_wrong_password(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {'email': user.email, 'password': 'WrongPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['code'] == 'invalid-credential'
        assert response.data['error'] == 'E-mail ou senha inválidos.'

    def test_login_unknown_email(self, api_client, db):
        """Unknown email gives the same answer as a wrong password."""
        url = reverse('users:login')
        response = api_client.post(url, {'email': 'nobody@example.com', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['code'] == 'invalid-credential'

    def test_login_inactive_account(self, api_client, inactive_user):
        url = reverse('users:login')
        response = api_client.post(url, {'email': inactive_user.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['code'] == 'user-disabled'
        assert response.data['error'] == 'Esta conta foi desativada.'

    def test_login_missing_fields(self, api_client, db):
        url = reverse('users:login')
        response = api_client.post(url, {'email': 'test@example.com'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestLogout:
    """Tests for POST /api/auth/logout/"""

    def test_logout_success(self, authenticated_client, user):
        url = reverse('users:logout')
        refresh = RefreshToken.for_user(user)
        response = authenticated_client.post(url, {'refresh': str(refresh)})

        assert response.status_code == status.HTTP_200_OK

    def test_logout_invalid_token(self, authenticated_client):
        url = reverse('users:logout')
        response = authenticated_client.post(url, {'refresh': 'garbage'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_logout_requires_auth(self, api_client):
        url = reverse('users:logout')
        response = api_client.post(url, {})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestProfile:
    """Tests for /api/auth/user/ endpoints"""

    def test_get_current_user(self, authenticated_client, user):
        url = reverse('users:current-user')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email
        assert response.data['plan'] == Plan.FREE

    def test_get_current_user_unauthenticated(self, api_client):
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_display_name(self, authenticated_client, user):
        url = reverse('users:update-profile')
        response = authenticated_client.patch(url, {'display_name': '  Oficina do Zé  '})

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.display_name == 'Oficina do Zé'

    def test_update_display_name_blank(self, authenticated_client):
        url = reverse('users:update-profile')
        response = authenticated_client.patch(url, {'display_name': ''})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Plan Tests
# =============================================================================

@pytest.mark.django_db
class TestPlan:
    """Tests for /api/auth/plan/ endpoints"""

    def test_plan_status_free(self, authenticated_client, user):
        ServiceOrder.objects.create(owner=user, customer_name='Ana', device='iPhone 11')

        url = reverse('users:plan')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['plan'] == Plan.FREE
        assert response.data['limits']['orders'] == settings.FREE_PLAN_ORDER_LIMIT
        assert response.data['limits']['customers'] == settings.FREE_PLAN_CUSTOMER_LIMIT
        assert response.data['usage']['orders'] == 1
        assert response.data['usage']['customers'] == 0
        assert response.data['upgrade_url'] == settings.PRO_UPGRADE_URL

    def test_confirm_upgrade(self, authenticated_client, user):
        url = reverse('users:plan-upgrade')
        response = authenticated_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['plan'] == Plan.PRO

        user.refresh_from_db()
        assert user.is_pro
        assert user.plan_upgraded_at is not None

    def test_plan_status_pro_is_unlimited(self, api_client, pro_user):
        refresh = RefreshToken.for_user(pro_user)
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')

        response = api_client.get(reverse('users:plan'))

        assert response.data['plan'] == Plan.PRO
        assert response.data['limits']['orders'] is None
        assert response.data['limits']['customers'] is None
        assert response.data['upgrade_url'] is None

    def test_confirm_upgrade_twice_keeps_first_date(self, authenticated_client, user):
        url = reverse('users:plan-upgrade')
        authenticated_client.post(url)
        user.refresh_from_db()
        first = user.plan_upgraded_at

        authenticated_client.post(url)
        user.refresh_from_db()

        assert user.plan_upgraded_at == first
