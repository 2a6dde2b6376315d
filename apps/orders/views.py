from rest_framework import viewsets, mixins, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.accounts.permissions import IsAccountOwner
from apps.accounts.responses import plan_limit_response
from apps.accounts.services import PlanLimitExceededError
from .models import ServiceOrder
from .serializers import (
    OrderFilterSerializer,
    ServiceOrderCreateSerializer,
    ServiceOrderUpdateSerializer,
    ServiceOrderSerializer,
    ServiceOrderListSerializer,
    KanbanColumnSerializer,
    TechnicianSerializer,
)
from .services import (
    get_account_orders,
    create_order,
    update_order,
    complete_order,
    delete_order,
    get_kanban_board,
    get_technicians,
    create_technician,
    delete_technician,
    OrderNotFoundError,
    CustomerNotFoundError,
    InvalidProgressError,
    TechnicianNotFoundError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()
    code = drf_serializers.CharField(required=False)


@extend_schema_view(
    list=extend_schema(parameters=[OrderFilterSerializer], tags=['orders']),
    retrieve=extend_schema(tags=['orders']),
    create=extend_schema(
        request=ServiceOrderCreateSerializer,
        responses={201: ServiceOrderSerializer, 403: ErrorResponseSerializer},
        tags=['orders'],
    ),
    update=extend_schema(
        request=ServiceOrderUpdateSerializer,
        responses={200: ServiceOrderSerializer},
        tags=['orders'],
    ),
    partial_update=extend_schema(
        request=ServiceOrderUpdateSerializer,
        responses={200: ServiceOrderSerializer},
        tags=['orders'],
    ),
    destroy=extend_schema(tags=['orders']),
)
class ServiceOrderViewSet(viewsets.ModelViewSet):
    """
    ViewSet for service orders of the current account.

    list: Get all orders, newest first (filterable by status/customer/search)
    create: Open an order (free plan capped)
    retrieve: Get a specific order
    update / partial_update: Edit fields, progress or status
    destroy: Delete an order
    complete: Finish an order (progress 100, Ready)
    kanban: Orders grouped by status
    """

    serializer_class = ServiceOrderSerializer
    permission_classes = [IsAuthenticated, IsAccountOwner]
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        """Owner-scoped orders, filtered by validated query parameters."""
        if self.action != 'list':
            return ServiceOrder.objects.filter(owner=self.request.user)

        filter_serializer = OrderFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return get_account_orders(
            owner=self.request.user,
            status=params.get('status'),
            customer_id=params.get('customer'),
            search=params.get('search', ''),
        )

    def get_serializer_class(self):
        if self.action == 'list':
            return ServiceOrderListSerializer
        return ServiceOrderSerializer

    def create(self, request, *args, **kwargs):
        """Open a service order using the service layer."""
        serializer = ServiceOrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = create_order(owner=request.user, **serializer.validated_data)
        except PlanLimitExceededError as e:
            return plan_limit_response(e)
        except CustomerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ServiceOrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Apply the fields sent; PUT and PATCH behave the same."""
        serializer = ServiceOrderUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            order = update_order(
                owner=request.user,
                order_id=kwargs['pk'],
                **serializer.validated_data
            )
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (CustomerNotFoundError, InvalidProgressError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ServiceOrderSerializer(order).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_order(owner=request.user, order_id=kwargs['pk'])
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: ServiceOrderSerializer}, tags=['orders'])
    @action(detail=True, methods=['post'])
    def complete(self, request, pk=None):
        """
        Finish the repair.

        POST /api/orders/{id}/complete/
        """
        try:
            order = complete_order(owner=request.user, order_id=pk)
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(ServiceOrderSerializer(order).data)

    @extend_schema(responses={200: KanbanColumnSerializer(many=True)}, tags=['orders'])
    @action(detail=False, methods=['get'])
    def kanban(self, request):
        """
        Orders grouped into one column per status, in workflow order.

        GET /api/orders/kanban/
        """
        board = get_kanban_board(owner=request.user)
        return Response(KanbanColumnSerializer(board, many=True).data)


@extend_schema_view(
    list=extend_schema(tags=['orders']),
    create=extend_schema(tags=['orders']),
    destroy=extend_schema(tags=['orders']),
)
class TechnicianViewSet(mixins.ListModelMixin,
                        mixins.CreateModelMixin,
                        mixins.DestroyModelMixin,
                        viewsets.GenericViewSet):
    """
    Technician roster of the current account.

    list: Get all technicians
    create: Add a technician
    destroy: Remove a technician
    """

    serializer_class = TechnicianSerializer
    permission_classes = [IsAuthenticated, IsAccountOwner]
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        return get_technicians(owner=self.request.user)

    def perform_create(self, serializer):
        serializer.instance = create_technician(
            owner=self.request.user,
            name=serializer.validated_data['name'],
        )

    def destroy(self, request, *args, **kwargs):
        try:
            delete_technician(owner=request.user, technician_id=kwargs['pk'])
        except TechnicianNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
