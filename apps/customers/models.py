from django.db import models
import uuid


DEFAULT_PHONE = '(00) 00000-0000'


def build_initials(name):
    """First letters of the first two words, upper-cased ("??" when empty)."""
    initials = ''.join(part[0] for part in name.split() if part)[:2].upper()
    return initials or '??'


class Customer(models.Model):
    """Repair-shop customer."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='customers'
    )

    name = models.CharField(max_length=200)
    initials = models.CharField(max_length=2, editable=False)
    phone = models.CharField(max_length=30, default=DEFAULT_PHONE, blank=True)
    cpf = models.CharField(max_length=20, blank=True)

    # Touched whenever a service order is opened for this customer
    last_visit = models.DateTimeField(null=True, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customers'
        indexes = [
            models.Index(fields=['owner', 'name'], name='customers_owner_name_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        self.initials = build_initials(self.name)
        if not self.phone:
            self.phone = DEFAULT_PHONE
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'name' in update_fields:
            kwargs['update_fields'] = set(update_fields) | {'initials'}
        super().save(*args, **kwargs)
