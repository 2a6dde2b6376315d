from django.contrib import admin
from .models import ServiceOrder, Technician


@admin.register(ServiceOrder)
class ServiceOrderAdmin(admin.ModelAdmin):
    """Admin interface for service orders."""

    list_display = [
        'device',
        'customer_name',
        'owner',
        'status',
        'priority',
        'progress',
        'value',
        'created_at'
    ]
    list_filter = ['status', 'priority', 'created_at']
    search_fields = ['device', 'customer_name', 'serial', 'imei', 'owner__email']
    readonly_fields = ['value', 'created_at', 'updated_at']
    raw_id_fields = ['owner', 'customer']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Customer & Device', {
            'fields': ('owner', 'customer', 'customer_name', 'device', 'problem', 'serial', 'imei')
        }),
        ('Workflow', {
            'fields': ('status', 'priority', 'technician', 'progress')
        }),
        ('Values', {
            'fields': ('labor_value', 'parts_value', 'value')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def save_model(self, request, obj, form, change):
        obj.value = obj.labor_value + obj.parts_value
        super().save_model(request, obj, form, change)


@admin.register(Technician)
class TechnicianAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner', 'created_at']
    search_fields = ['name', 'owner__email']
    raw_id_fields = ['owner']
