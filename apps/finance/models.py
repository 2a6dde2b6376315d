from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class ExpenseCategory(models.TextChoices):
    RENT = 'Aluguel', 'Aluguel'
    INTERNET = 'Internet', 'Internet'
    ELECTRICITY = 'Luz', 'Luz'
    TOOLS = 'Ferramentas', 'Ferramentas'
    SUBSCRIPTIONS = 'Assinaturas', 'Assinaturas'
    OTHER = 'Outros', 'Outros'


class FixedExpense(models.Model):
    """Recurring monthly business cost (rent, utilities, subscriptions)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='fixed_expenses'
    )

    category = models.CharField(
        max_length=20,
        choices=ExpenseCategory.choices,
        default=ExpenseCategory.OTHER
    )
    description = models.CharField(max_length=200)
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'fixed_expenses'
        ordering = ['category', 'description']

    def __str__(self):
        return f"{self.category}: {self.description} ({self.amount})"
