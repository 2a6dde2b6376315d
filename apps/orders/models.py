from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from decimal import Decimal
import uuid


class OrderStatus(models.TextChoices):
    RECEIVED = 'received', 'Recebido'
    DIAGNOSIS = 'diagnosis', 'Diagnóstico'
    WAITING_PARTS = 'waiting_parts', 'Aguardando Peças'
    REPAIRING = 'repairing', 'Em Reparo'
    READY = 'ready', 'Pronto'


class OrderPriority(models.TextChoices):
    LOW = 'low', 'Baixa'
    MEDIUM = 'medium', 'Média'
    URGENT = 'urgent', 'Urgente'


class ServiceOrder(models.Model):
    """Repair ticket (OS): tracks a device from intake to pickup."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='service_orders'
    )

    # Customer (name kept so the order survives customer deletion)
    customer = models.ForeignKey(
        'customers.Customer',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='service_orders'
    )
    customer_name = models.CharField(max_length=200)

    # Device intake
    device = models.CharField(max_length=200)
    problem = models.TextField(blank=True)
    serial = models.CharField(max_length=100, blank=True)
    imei = models.CharField(max_length=30, blank=True)

    # Workflow
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.RECEIVED
    )
    priority = models.CharField(
        max_length=10,
        choices=OrderPriority.choices,
        default=OrderPriority.MEDIUM
    )
    technician = models.CharField(max_length=100, blank=True)
    progress = models.PositiveSmallIntegerField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(100)]
    )

    # Financial details (value = labor_value + parts_value)
    labor_value = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    parts_value = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    value = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'service_orders'
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='orders_owner_created_idx'),
            models.Index(fields=['owner', 'status'], name='orders_owner_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.device} - {self.customer_name} ({self.get_status_display()})"

    @property
    def is_ready(self):
        return self.status == OrderStatus.READY


class Technician(models.Model):
    """Technician that can be assigned to service orders."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='technicians'
    )
    name = models.CharField(max_length=100)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'technicians'
        ordering = ['name']

    def __str__(self):
        return self.name
