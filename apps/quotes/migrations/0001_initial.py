# Generated manually for the quotes app

import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
        ('catalog', '0001_initial'),
        ('clients', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Quote',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('client_name', models.CharField(max_length=200)),
                ('client_phone', models.CharField(blank=True, max_length=30)),
                ('total', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('status', models.CharField(choices=[('pending', 'Pendente'), ('approved', 'Aprovado'), ('rejected', 'Rejeitado'), ('converted', 'Convertido em venda'), ('partially_paid', 'Parcialmente pago'), ('fully_paid', 'Pago')], default='pending', max_length=20)),
                ('production_status', models.CharField(choices=[('waiting_approval', 'Aguardando Aprovação'), ('approved', 'Aprovado'), ('in_production', 'Em Produção'), ('finishing', 'Acabamento'), ('ready', 'Pronto para Retirada'), ('delivered', 'Entregue')], default='waiting_approval', max_length=20)),
                ('valid_until', models.DateField()),
                ('delivery_date', models.DateField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('client', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='quotes', to='clients.client')),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='accounts.company')),
            ],
            options={
                'db_table': 'quotes',
                'ordering': ['-created_at'],
                'abstract': False,
                'indexes': [
                    models.Index(fields=['company', 'status'], name='quotes_company_status_idx'),
                    models.Index(fields=['company', 'created_at'], name='quotes_company_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='QuoteItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('measurement_unit', models.CharField(choices=[('unit', 'Unit'), ('m2', 'Square meter'), ('linear_meter', 'Linear meter')], default='unit', max_length=20)),
                ('quantity', models.DecimalField(decimal_places=3, max_digits=12, validators=[MinValueValidator(Decimal('0.001'))])),
                ('width', models.DecimalField(blank=True, decimal_places=3, max_digits=8, null=True)),
                ('height', models.DecimalField(blank=True, decimal_places=3, max_digits=8, null=True)),
                ('unit_price', models.DecimalField(decimal_places=2, max_digits=10)),
                ('total', models.DecimalField(decimal_places=2, max_digits=12)),
                ('position', models.PositiveIntegerField(default=0)),
                ('product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='catalog.product')),
                ('service', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='catalog.service')),
                ('quote', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='quotes.quote')),
            ],
            options={
                'db_table': 'quote_items',
                'ordering': ['position'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Payment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.01'))])),
                ('method', models.CharField(choices=[('cash', 'Dinheiro'), ('credit', 'Cartão de crédito'), ('debit', 'Cartão de débito'), ('pix', 'PIX'), ('boleto', 'Boleto')], max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('quote', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='payments', to='quotes.quote')),
            ],
            options={
                'db_table': 'quote_payments',
                'ordering': ['created_at'],
            },
        ),
    ]
