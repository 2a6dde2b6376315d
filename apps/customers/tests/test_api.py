import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from apps.customers.models import Customer
from apps.orders.models import ServiceOrder


@pytest.mark.django_db
class TestCustomerList:
    """Tests for GET /api/customers/"""

    def test_list_with_order_count(self, authenticated_client, customer, make_orders, other_user):
        make_orders(customer, 2)
        Customer.objects.create(owner=other_user, name='Cliente Alheio')

        url = reverse('customers:customer-list')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['name'] == 'Maria Silva'
        assert response.data[0]['os'] == 2
        assert response.data[0]['initials'] == 'MS'
        assert response.data[0]['last_visit_display'] == 'Recém cadastrado'

    def test_loyal_filter(self, authenticated_client, user, make_orders):
        loyal = Customer.objects.create(owner=user, name='Fiel')
        casual = Customer.objects.create(owner=user, name='Eventual')
        make_orders(loyal, 3)
        make_orders(casual, 2)

        url = reverse('customers:customer-list')
        response = authenticated_client.get(url, {'filter': 'Fidelizados'})

        assert [item['name'] for item in response.data] == ['Fiel']

    def test_search(self, authenticated_client, user, customer):
        Customer.objects.create(owner=user, name='Pedro Alves')

        url = reverse('customers:customer-list')
        response = authenticated_client.get(url, {'search': '123.456'})

        assert [item['name'] for item in response.data] == ['Maria Silva']

    def test_unknown_filter(self, authenticated_client):
        url = reverse('customers:customer-list')
        response = authenticated_client.get(url, {'filter': 'vip'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestCustomerCreate:
    """Tests for POST /api/customers/"""

    def test_create(self, authenticated_client, user):
        url = reverse('customers:customer-list')
        response = authenticated_client.post(url, {'name': 'Ana Costa', 'cpf': ''}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['initials'] == 'AC'
        assert response.data['phone'] == '(00) 00000-0000'
        assert response.data['os'] == 0

    def test_create_blank_name(self, authenticated_client):
        url = reverse('customers:customer-list')
        response = authenticated_client.post(url, {'name': '  '}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_free_plan_sixth_customer_forbidden(self, authenticated_client, user):
        for i in range(5):
            Customer.objects.create(owner=user, name=f'Cliente {i}')

        url = reverse('customers:customer-list')
        response = authenticated_client.post(url, {'name': 'Sexto'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['code'] == 'plan-limit-exceeded'
        assert 'Clientes' in response.data['error']
        assert not Customer.objects.filter(name='Sexto').exists()


@pytest.mark.django_db
class TestCustomerDetail:
    """Tests for /api/customers/{id}/"""

    def test_retrieve_includes_orders(self, authenticated_client, customer, make_orders):
        make_orders(customer, 2)

        url = reverse('customers:customer-detail', kwargs={'pk': customer.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['os'] == 2
        assert len(response.data['orders']) == 2

    def test_retrieve_other_account_customer(self, api_client, other_user, customer):
        refresh = RefreshToken.for_user(other_user)
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')

        url = reverse('customers:customer-detail', kwargs={'pk': customer.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_rename_updates_orders(self, authenticated_client, customer, make_orders):
        orders = make_orders(customer, 1)

        url = reverse('customers:customer-detail', kwargs={'pk': customer.id})
        response = authenticated_client.patch(url, {'name': 'Maria Souza'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert ServiceOrder.objects.get(id=orders[0].id).customer_name == 'Maria Souza'

    def test_delete(self, authenticated_client, customer):
        url = reverse('customers:customer-detail', kwargs={'pk': customer.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Customer.objects.filter(id=customer.id).exists()
