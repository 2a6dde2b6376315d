from django.contrib import admin
from .models import InventoryItem


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    """Admin interface for stock items."""

    list_display = ['name', 'model', 'quantity', 'unit_cost', 'stock_status', 'owner']
    search_fields = ['name', 'model', 'owner__email']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['owner']
    ordering = ['name']

    def stock_status(self, obj):
        return obj.get_status_display()
    stock_status.short_description = 'Status'
