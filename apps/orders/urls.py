from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'orders'

# Router for ViewSets
# Note: technicians must be registered BEFORE empty prefix to avoid URL conflicts
router = DefaultRouter()
router.register(r'technicians', views.TechnicianViewSet, basename='technician')
router.register(r'', views.ServiceOrderViewSet, basename='order')

urlpatterns = [
    # Service order routes
    # GET    /api/orders/                 - List orders (?status=&customer=&search=)
    # POST   /api/orders/                 - Open order
    # GET    /api/orders/{id}/            - Get order
    # PATCH  /api/orders/{id}/            - Update fields, progress or status
    # DELETE /api/orders/{id}/            - Delete order
    # POST   /api/orders/{id}/complete/   - Finish repair (progress 100, Ready)
    # GET    /api/orders/kanban/          - Orders grouped by status

    # Technician routes
    # GET    /api/orders/technicians/       - List technicians
    # POST   /api/orders/technicians/       - Add technician
    # DELETE /api/orders/technicians/{id}/  - Remove technician

    path('', include(router.urls)),
]
