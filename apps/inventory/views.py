from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.accounts.permissions import IsAccountOwner
from .models import InventoryItem
from .serializers import InventoryFilterSerializer, InventoryItemSerializer
from .services import get_account_items, create_item, update_item, delete_item
from .exceptions import InventoryItemNotFoundError


@extend_schema_view(
    list=extend_schema(parameters=[InventoryFilterSerializer], tags=['inventory']),
    retrieve=extend_schema(tags=['inventory']),
    create=extend_schema(tags=['inventory']),
    update=extend_schema(tags=['inventory']),
    partial_update=extend_schema(tags=['inventory']),
    destroy=extend_schema(tags=['inventory']),
)
class InventoryItemViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the stock of the current account.

    list: Get items (?search= name or model, ?status= low_stock/available)
    create: Add an item
    retrieve: Get an item
    update / partial_update: Edit an item
    destroy: Delete an item
    """

    serializer_class = InventoryItemSerializer
    permission_classes = [IsAuthenticated, IsAccountOwner]
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        """Owner-scoped items, filtered by validated query parameters."""
        if self.action != 'list':
            return InventoryItem.objects.filter(owner=self.request.user)

        filter_serializer = InventoryFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return get_account_items(
            owner=self.request.user,
            search=params.get('search', ''),
            status=params.get('status'),
        )

    def perform_create(self, serializer):
        serializer.instance = create_item(owner=self.request.user, **serializer.validated_data)

    def update(self, request, *args, **kwargs):
        """Apply the fields sent; PUT and PATCH behave the same."""
        serializer = InventoryItemSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            item = update_item(owner=request.user, item_id=kwargs['pk'], **serializer.validated_data)
        except InventoryItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(InventoryItemSerializer(item).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_item(owner=request.user, item_id=kwargs['pk'])
        except InventoryItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
