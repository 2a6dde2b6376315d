from rest_framework import serializers
from apps.finance.formatting import format_brl, format_short_date_br
from django.utils import timezone
from .models import ServiceOrder, Technician, OrderStatus, OrderPriority


# =============================================================================
# Input Serializers
# =============================================================================

class OrderFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for order filtering.

    Query Parameters:
        status (str): Filter by workflow status
        customer (UUID): Filter by customer ID
        search (str): Match customer name or device
    """

    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False)
    customer = serializers.UUIDField(required=False)
    search = serializers.CharField(max_length=200, required=False, allow_blank=True)


class ServiceOrderCreateSerializer(serializers.Serializer):
    """
    Validate input for opening a service order.

    Either ``customer_id`` or ``customer_name`` must be given. Status,
    progress and the total value are set by the server.
    """

    customer_id = serializers.UUIDField(required=False, allow_null=True)
    customer_name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    device = serializers.CharField(max_length=200)
    problem = serializers.CharField(required=False, allow_blank=True, default='')
    serial = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    imei = serializers.CharField(max_length=30, required=False, allow_blank=True, default='')
    priority = serializers.ChoiceField(choices=OrderPriority.choices, default=OrderPriority.MEDIUM)
    technician = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True, default='')
    labor_value = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False, default=0)
    parts_value = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False, default=0)

    def validate(self, attrs):
        if not attrs.get('customer_id') and not (attrs.get('customer_name') or '').strip():
            raise serializers.ValidationError({
                'customer_name': 'Informe o cliente da OS.'
            })
        return attrs


class ServiceOrderUpdateSerializer(serializers.Serializer):
    """Validate a partial update. Only the fields sent are changed."""

    customer_id = serializers.UUIDField(required=False, allow_null=True)
    customer_name = serializers.CharField(max_length=200, required=False)
    device = serializers.CharField(max_length=200, required=False)
    problem = serializers.CharField(required=False, allow_blank=True)
    serial = serializers.CharField(max_length=100, required=False, allow_blank=True)
    imei = serializers.CharField(max_length=30, required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False)
    priority = serializers.ChoiceField(choices=OrderPriority.choices, required=False)
    technician = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    progress = serializers.IntegerField(required=False)
    labor_value = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    parts_value = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class ServiceOrderSerializer(serializers.ModelSerializer):
    """Main serializer for service orders."""

    status_display = serializers.CharField(source='get_status_display', read_only=True)
    priority_display = serializers.CharField(source='get_priority_display', read_only=True)
    date = serializers.SerializerMethodField()
    formatted_value = serializers.SerializerMethodField()

    class Meta:
        model = ServiceOrder
        fields = [
            'id',
            'customer',
            'customer_name',
            'device',
            'problem',
            'serial',
            'imei',
            'status',
            'status_display',
            'priority',
            'priority_display',
            'technician',
            'progress',
            'labor_value',
            'parts_value',
            'value',
            'formatted_value',
            'date',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_date(self, obj):
        """Display date, e.g. '09 de out.'."""
        return format_short_date_br(timezone.localtime(obj.created_at).date())

    def get_formatted_value(self, obj):
        return format_brl(obj.value)


class ServiceOrderListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for lists and the kanban board."""

    status_display = serializers.CharField(source='get_status_display', read_only=True)
    priority_display = serializers.CharField(source='get_priority_display', read_only=True)

    class Meta:
        model = ServiceOrder
        fields = [
            'id',
            'customer',
            'customer_name',
            'device',
            'status',
            'status_display',
            'priority',
            'priority_display',
            'technician',
            'progress',
            'value',
            'created_at',
        ]
        read_only_fields = fields


class KanbanColumnSerializer(serializers.Serializer):
    status = serializers.CharField()
    label = serializers.CharField()
    orders = ServiceOrderListSerializer(many=True)


class TechnicianSerializer(serializers.ModelSerializer):
    class Meta:
        model = Technician
        fields = ['id', 'name', 'created_at']
        read_only_fields = ['id', 'created_at']

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Informe o nome do técnico.")
        return value.strip()
