from django.contrib import admin
from .models import FixedExpense


@admin.register(FixedExpense)
class FixedExpenseAdmin(admin.ModelAdmin):
    list_display = ['description', 'category', 'amount', 'owner', 'created_at']
    list_filter = ['category']
    search_fields = ['description', 'owner__email']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['owner']
