from django.contrib import admin
from django.db.models import Count
from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    """Admin interface for customers."""

    list_display = ['name', 'phone', 'cpf', 'owner', 'order_count', 'last_visit', 'created_at']
    search_fields = ['name', 'cpf', 'phone', 'owner__email']
    readonly_fields = ['initials', 'last_visit', 'created_at', 'updated_at']
    raw_id_fields = ['owner']
    ordering = ['name']

    def order_count(self, obj):
        """Show how many service orders the customer has."""
        return obj.order_total
    order_count.short_description = 'OS'
    order_count.admin_order_field = 'order_total'

    def get_queryset(self, request):
        """Optimize query with annotation."""
        qs = super().get_queryset(request)
        return qs.annotate(order_total=Count('service_orders'))
