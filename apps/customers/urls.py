from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'customers'

router = DefaultRouter()
router.register(r'', views.CustomerViewSet, basename='customer')

urlpatterns = [
    # Customer ViewSet routes
    # GET    /api/customers/          - List customers (?search=&filter=)
    # POST   /api/customers/          - Register customer
    # GET    /api/customers/{id}/     - Get customer with orders
    # PATCH  /api/customers/{id}/     - Update customer
    # DELETE /api/customers/{id}/     - Delete customer

    path('', include(router.urls)),
]
