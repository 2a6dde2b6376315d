from rest_framework import serializers
from django.utils import timezone
from apps.finance.formatting import format_short_date_br
from apps.orders.serializers import ServiceOrderListSerializer
from .models import Customer

NEVER_VISITED_LABEL = 'Recém cadastrado'


# =============================================================================
# Input Serializers
# =============================================================================

class CustomerFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for the customer list.

    Query Parameters:
        search (str): Name or CPF substring
        filter (str): all/recent/active/loyal/ready, or the Portuguese tab label
    """

    search = serializers.CharField(max_length=200, required=False, allow_blank=True)
    filter = serializers.CharField(max_length=30, required=False, allow_blank=True)


# =============================================================================
# Output Serializers
# =============================================================================

class CustomerSerializer(serializers.ModelSerializer):
    """Customer with the number of orders and a display date for the last visit."""

    os = serializers.SerializerMethodField()
    last_visit_display = serializers.SerializerMethodField()

    class Meta:
        model = Customer
        fields = [
            'id',
            'name',
            'initials',
            'phone',
            'cpf',
            'os',
            'last_visit',
            'last_visit_display',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'initials', 'os', 'last_visit', 'created_at', 'updated_at']
        extra_kwargs = {
            'phone': {'required': False, 'allow_blank': True},
            'cpf': {'required': False, 'allow_blank': True},
        }

    def get_os(self, obj) -> int:
        """Number of service orders, derived from the orders themselves."""
        count = getattr(obj, 'order_count', None)
        if count is None:
            count = obj.service_orders.count()
        return count

    def get_last_visit_display(self, obj) -> str:
        if obj.last_visit is None:
            return NEVER_VISITED_LABEL
        return format_short_date_br(timezone.localtime(obj.last_visit).date())

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Informe o nome do cliente.")
        return value.strip()


class CustomerDetailSerializer(CustomerSerializer):
    """Customer with their service orders, newest first."""

    orders = serializers.SerializerMethodField()

    class Meta(CustomerSerializer.Meta):
        fields = CustomerSerializer.Meta.fields + ['orders']

    def get_orders(self, obj):
        orders = obj.service_orders.order_by('-created_at')
        return ServiceOrderListSerializer(orders, many=True).data
