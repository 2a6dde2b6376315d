from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class StockStatus(models.TextChoices):
    LOW_STOCK = 'low_stock', 'Estoque Baixo'
    AVAILABLE = 'available', 'Disponível'


def stock_status(quantity, threshold=None):
    """Low stock below the threshold (settings.LOW_STOCK_THRESHOLD), available otherwise."""
    if threshold is None:
        threshold = settings.LOW_STOCK_THRESHOLD
    return StockStatus.LOW_STOCK if (quantity or 0) < threshold else StockStatus.AVAILABLE


class InventoryItem(models.Model):
    """Spare part or accessory kept in stock."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='inventory_items'
    )

    name = models.CharField(max_length=200)
    model = models.CharField(max_length=200, default='Geral', blank=True)
    quantity = models.PositiveIntegerField(default=0)
    unit_cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'inventory_items'
        indexes = [
            models.Index(fields=['owner', 'name'], name='inventory_owner_name_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.model}) x{self.quantity}"

    @property
    def status(self):
        return stock_status(self.quantity)

    def get_status_display(self):
        return StockStatus(self.status).label

    @property
    def total_cost(self):
        return self.unit_cost * self.quantity
