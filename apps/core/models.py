from decimal import Decimal
import uuid

from django.core.validators import MinValueValidator
from django.db import models

from .money import quantize_money


class MeasurementUnit(models.TextChoices):
    UNIT = 'unit', 'Unit'
    SQUARE_METER = 'm2', 'Square meter'
    LINEAR_METER = 'linear_meter', 'Linear meter'


class CompanyOwnedModel(models.Model):
    """Base for records owned by a company (tenant scoping key)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(
        'accounts.Company',
        on_delete=models.CASCADE,
        related_name='+'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['-created_at']


class LineItem(models.Model):
    """
    Priced line of a quote or sale.

    Name, unit and price are snapshots taken when the line is written;
    later catalog edits never touch existing lines.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    service = models.ForeignKey(
        'catalog.Service',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    name = models.CharField(max_length=200)
    measurement_unit = models.CharField(
        max_length=20,
        choices=MeasurementUnit.choices,
        default=MeasurementUnit.UNIT
    )
    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        validators=[MinValueValidator(Decimal('0.001'))]
    )
    width = models.DecimalField(max_digits=8, decimal_places=3, null=True, blank=True)
    height = models.DecimalField(max_digits=8, decimal_places=3, null=True, blank=True)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    total = models.DecimalField(max_digits=12, decimal_places=2)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        abstract = True
        ordering = ['position']

    def __str__(self):
        return f"{self.name} x{self.quantity}"

    def compute_total(self):
        return quantize_money(Decimal(self.quantity) * Decimal(self.unit_price))

    def save(self, *args, **kwargs):
        self.total = self.compute_total()
        super().save(*args, **kwargs)


class PaymentMethod(models.TextChoices):
    CASH = 'cash', 'Dinheiro'
    CREDIT = 'credit', 'Cartão de crédito'
    DEBIT = 'debit', 'Cartão de débito'
    PIX = 'pix', 'PIX'
    BOLETO = 'boleto', 'Boleto'


class ProductionStatus(models.TextChoices):
    """Production stages, declared in their forward order."""
    WAITING_APPROVAL = 'waiting_approval', 'Aguardando Aprovação'
    APPROVED = 'approved', 'Aprovado'
    IN_PRODUCTION = 'in_production', 'Em Produção'
    FINISHING = 'finishing', 'Acabamento'
    READY = 'ready', 'Pronto para Retirada'
    DELIVERED = 'delivered', 'Entregue'

    @classmethod
    def rank(cls, value) -> int:
        """Position of ``value`` in the production order."""
        return cls.values.index(value)
