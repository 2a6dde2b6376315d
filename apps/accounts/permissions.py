"""
Permission classes shared by the account-scoped apps.

Every customer, order, inventory item and expense belongs to exactly one
account. Views also filter their querysets by owner, so records of other
accounts answer 404 before this check runs; the object check guards
any view that fetches objects some other way.

Usage:
    class CustomerViewSet(viewsets.ModelViewSet):
        permission_classes = [IsAuthenticated, IsAccountOwner]
"""
from rest_framework.permissions import BasePermission


class IsAccountOwner(BasePermission):
    """Allow access only to records owned by the requesting account."""

    message = 'Você não tem permissão para acessar este registro.'

    def has_object_permission(self, request, view, obj):
        return obj.owner_id == request.user.id
