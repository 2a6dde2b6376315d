from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'finance'

router = DefaultRouter()
router.register(r'expenses', views.FixedExpenseViewSet, basename='expense')

urlpatterns = [
    # Fixed expense routes
    # GET    /api/finance/expenses/          - List expenses
    # POST   /api/finance/expenses/          - Add expense
    # GET    /api/finance/expenses/{id}/     - Get expense
    # PATCH  /api/finance/expenses/{id}/     - Update expense
    # DELETE /api/finance/expenses/{id}/     - Delete expense

    # Reports
    path('summary/', views.financial_summary, name='summary'),
    path('weekly/', views.weekly_revenue, name='weekly'),
    path('dashboard/', views.dashboard, name='dashboard'),

    path('', include(router.urls)),
]
