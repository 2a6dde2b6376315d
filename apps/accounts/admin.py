# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils import timezone
from django.utils.html import format_html
from .models import User, Plan


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for shop accounts.

    Provides:
    - Account listing with plan tier and status
    - Filtering by plan and activity
    - Bulk plan changes for support requests
    """

    list_display = [
        'email',
        'display_name',
        'plan_badge',
        'is_active',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'plan',
        'is_active',
        'is_staff',
        'created_at',
    ]

    search_fields = [
        'email',
        'display_name',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    # Remove username field references from BaseUserAdmin
    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'display_name', 'password')
        }),
        ('Plan', {
            'fields': ('plan', 'plan_upgraded_at'),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'password1', 'password2'),
        }),
        ('Plan', {
            'fields': ('plan',),
        }),
    )

    readonly_fields = [
        'created_at',
        'last_login',
        'plan_upgraded_at',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def plan_badge(self, obj):
        """Display plan tier as colored badge."""
        if obj.plan == Plan.PRO:
            bg, fg = '#137fec', 'white'
        else:
            bg, fg = '#ccc', '#666'
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_plan_display()
        )
    plan_badge.short_description = 'Plano'
    plan_badge.admin_order_field = 'plan'

    actions = ['grant_pro', 'revert_to_free']

    @admin.action(description='Grant Pro plan')
    def grant_pro(self, request, queryset):
        count = queryset.exclude(plan=Plan.PRO).update(
            plan=Plan.PRO,
            plan_upgraded_at=timezone.now(),
        )
        self.message_user(request, f'Upgraded {count} account(s) to Pro.')

    @admin.action(description='Revert to free plan')
    def revert_to_free(self, request, queryset):
        count = queryset.update(plan=Plan.FREE, plan_upgraded_at=None)
        self.message_user(request, f'Reverted {count} account(s) to the free plan.')
