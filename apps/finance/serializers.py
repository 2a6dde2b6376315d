"""
Serializers for finance app.

Input Serializers:
    SummaryQuerySerializer - Validates the reporting month parameter

Model Serializers:
    FixedExpenseSerializer - Fixed expense CRUD

Response Serializers:
    SummaryResponseSerializer - Revenue, costs and real profit
    WeeklyPointSerializer - One day of the 7-day labor chart
    DashboardResponseSerializer - Summary, chart and latest orders
"""

from rest_framework import serializers
from apps.orders.serializers import ServiceOrderListSerializer
from .formatting import format_brl
from .models import FixedExpense


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class SummaryQuerySerializer(serializers.Serializer):
    """
    Validate summary query parameters.

    Query Parameters:
        month (str): Reporting month in YYYY-MM format (e.g., '2024-05').
            Omit for all-time figures.
    """

    month = serializers.CharField(
        max_length=7,
        required=False,
        allow_blank=True,
        help_text='Month in YYYY-MM format'
    )


# =============================================================================
# Model Serializers
# =============================================================================

class FixedExpenseSerializer(serializers.ModelSerializer):
    formatted_amount = serializers.SerializerMethodField()

    class Meta:
        model = FixedExpense
        fields = [
            'id',
            'category',
            'description',
            'amount',
            'formatted_amount',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_formatted_amount(self, obj):
        return format_brl(obj.amount)

    def validate_description(self, value):
        if not value.strip():
            raise serializers.ValidationError("Informe a descrição da despesa.")
        return value.strip()


# =============================================================================
# Response Serializers (API Documentation)
# =============================================================================

class FormattedTotalsSerializer(serializers.Serializer):
    total_gross_revenue = serializers.CharField()
    total_labor_revenue = serializers.CharField()
    total_parts_investment = serializers.CharField()
    total_fixed_expenses = serializers.CharField()
    real_profit = serializers.CharField()


class SummaryResponseSerializer(serializers.Serializer):
    """
    Financial summary.

    real_profit is labor revenue minus fixed expenses and may be negative.
    Percentages are shares of gross revenue (0 when there is no revenue).
    """

    total_gross_revenue = serializers.DecimalField(max_digits=20, decimal_places=2)
    total_labor_revenue = serializers.DecimalField(max_digits=20, decimal_places=2)
    total_parts_investment = serializers.DecimalField(max_digits=20, decimal_places=2)
    total_fixed_expenses = serializers.DecimalField(max_digits=20, decimal_places=2)
    real_profit = serializers.DecimalField(max_digits=20, decimal_places=2)
    real_profit_percentage = serializers.DecimalField(max_digits=20, decimal_places=1)
    parts_percentage = serializers.DecimalField(max_digits=20, decimal_places=1)
    fixed_expenses_percentage = serializers.DecimalField(max_digits=20, decimal_places=1)
    orders_count = serializers.IntegerField()
    month = serializers.CharField(allow_null=True)
    expenses_scope = serializers.CharField()
    formatted = FormattedTotalsSerializer()


class WeeklyPointSerializer(serializers.Serializer):
    name = serializers.CharField()
    date = serializers.DateField()
    full_date = serializers.CharField()
    value = serializers.DecimalField(max_digits=20, decimal_places=2)
    is_today = serializers.BooleanField()


class DashboardResponseSerializer(serializers.Serializer):
    summary = SummaryResponseSerializer()
    weekly = WeeklyPointSerializer(many=True)
    recent_orders = ServiceOrderListSerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
