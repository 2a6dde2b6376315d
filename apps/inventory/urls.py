from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'inventory'

router = DefaultRouter()
router.register(r'', views.InventoryItemViewSet, basename='item')

urlpatterns = [
    # Inventory ViewSet routes
    # GET    /api/inventory/          - List items (?search=&status=)
    # POST   /api/inventory/          - Add item
    # GET    /api/inventory/{id}/     - Get item
    # PATCH  /api/inventory/{id}/     - Update item
    # DELETE /api/inventory/{id}/     - Delete item

    path('', include(router.urls)),
]
