# Generated manually for the orders app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('customers', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ServiceOrder',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('customer_name', models.CharField(max_length=200)),
                ('device', models.CharField(max_length=200)),
                ('problem', models.TextField(blank=True)),
                ('serial', models.CharField(blank=True, max_length=100)),
                ('imei', models.CharField(blank=True, max_length=30)),
                ('status', models.CharField(choices=[('received', 'Recebido'), ('diagnosis', 'Diagnóstico'), ('waiting_parts', 'Aguardando Peças'), ('repairing', 'Em Reparo'), ('ready', 'Pronto')], default='received', max_length=20)),
                ('priority', models.CharField(choices=[('low', 'Baixa'), ('medium', 'Média'), ('urgent', 'Urgente')], default='medium', max_length=10)),
                ('technician', models.CharField(blank=True, max_length=100)),
                ('progress', models.PositiveSmallIntegerField(default=0, validators=[MinValueValidator(0), MaxValueValidator(100)])),
                ('labor_value', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('parts_value', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('value', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('customer', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='service_orders', to='customers.customer')),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='service_orders', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'service_orders',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['owner', 'created_at'], name='orders_owner_created_idx'),
                    models.Index(fields=['owner', 'status'], name='orders_owner_status_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Technician',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='technicians', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'technicians',
                'ordering': ['name'],
            },
        ),
    ]
