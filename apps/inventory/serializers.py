from rest_framework import serializers
from apps.finance.formatting import format_brl
from .models import InventoryItem, StockStatus


class InventoryFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for the stock list.

    Query Parameters:
        search (str): Name or model substring
        status (str): low_stock / available
    """

    search = serializers.CharField(max_length=200, required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=StockStatus.choices, required=False)


class InventoryItemSerializer(serializers.ModelSerializer):
    """Stock item with its derived status."""

    status = serializers.CharField(read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    formatted_unit_cost = serializers.SerializerMethodField()

    class Meta:
        model = InventoryItem
        fields = [
            'id',
            'name',
            'model',
            'quantity',
            'unit_cost',
            'formatted_unit_cost',
            'status',
            'status_display',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'model': {'required': False, 'allow_blank': True},
        }

    def get_formatted_unit_cost(self, obj):
        return format_brl(obj.unit_cost)

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Informe o nome do item.")
        return value.strip()
