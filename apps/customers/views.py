from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.accounts.permissions import IsAccountOwner
from apps.accounts.responses import plan_limit_response
from apps.accounts.services import PlanLimitExceededError
from .serializers import (
    CustomerFilterSerializer,
    CustomerSerializer,
    CustomerDetailSerializer,
)
from .services import (
    get_account_customers,
    filter_customers,
    create_customer,
    update_customer,
    delete_customer,
    CustomerNotFoundError,
    InvalidCustomerFilterError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()
    code = drf_serializers.CharField(required=False)


@extend_schema_view(
    list=extend_schema(parameters=[CustomerFilterSerializer], tags=['customers']),
    retrieve=extend_schema(responses={200: CustomerDetailSerializer}, tags=['customers']),
    create=extend_schema(
        responses={201: CustomerSerializer, 403: ErrorResponseSerializer},
        tags=['customers'],
    ),
    update=extend_schema(tags=['customers']),
    partial_update=extend_schema(tags=['customers']),
    destroy=extend_schema(tags=['customers']),
)
class CustomerViewSet(viewsets.ModelViewSet):
    """
    ViewSet for customers of the current account.

    list: Get customers (?search= name or CPF, ?filter= all/recent/active/loyal/ready)
    create: Register a customer (free plan capped)
    retrieve: Get a customer with their orders
    update / partial_update: Edit a customer; a rename is copied to their orders
    destroy: Delete a customer (orders are kept)
    """

    serializer_class = CustomerSerializer
    permission_classes = [IsAuthenticated, IsAccountOwner]
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        return get_account_customers(owner=self.request.user)

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return CustomerDetailSerializer
        return CustomerSerializer

    def list(self, request, *args, **kwargs):
        """List customers after search and the selected filter."""
        filter_serializer = CustomerFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        try:
            customers = filter_customers(
                self.get_queryset(),
                filter_name=params.get('filter'),
                search=params.get('search', ''),
            )
        except InvalidCustomerFilterError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CustomerSerializer(customers, many=True).data)

    def create(self, request, *args, **kwargs):
        """Register a customer using the service layer."""
        serializer = CustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            customer = create_customer(
                owner=request.user,
                name=serializer.validated_data['name'],
                phone=serializer.validated_data.get('phone', ''),
                cpf=serializer.validated_data.get('cpf', ''),
            )
        except PlanLimitExceededError as e:
            return plan_limit_response(e)

        return Response(CustomerSerializer(customer).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Apply the fields sent; PUT and PATCH behave the same."""
        serializer = CustomerSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            customer = update_customer(
                owner=request.user,
                customer_id=kwargs['pk'],
                **serializer.validated_data
            )
        except CustomerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(CustomerSerializer(customer).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_customer(owner=request.user, customer_id=kwargs['pk'])
        except CustomerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
