from decimal import Decimal

from django.db import models

from apps.core.models import CompanyOwnedModel, LineItem, PaymentMethod, ProductionStatus


class SaleStatus(models.TextChoices):
    PENDING = 'pending', 'Pendente'
    PAID = 'paid', 'Pago'
    CANCELLED = 'cancelled', 'Cancelado'


class Sale(CompanyOwnedModel):
    """
    Completed order, entered directly or converted from a quote.

    A sale converted from a quote keeps the ``quote`` link; its production
    status is kept in step with that quote.
    """

    client = models.ForeignKey(
        'clients.Client',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sales'
    )
    client_name = models.CharField(max_length=200)
    client_phone = models.CharField(max_length=30, blank=True)

    quote = models.ForeignKey(
        'quotes.Quote',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sales'
    )

    total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    status = models.CharField(
        max_length=20,
        choices=SaleStatus.choices,
        default=SaleStatus.PENDING
    )
    production_status = models.CharField(
        max_length=20,
        choices=ProductionStatus.choices,
        null=True,
        blank=True
    )
    delivery_date = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True)

    class Meta(CompanyOwnedModel.Meta):
        db_table = 'sales'
        indexes = [
            models.Index(fields=['company', 'status'], name='sales_company_status_idx'),
            models.Index(fields=['company', 'created_at'], name='sales_company_created_idx'),
        ]

    def __str__(self):
        return f"Sale {self.reference} - {self.client_name}"

    @property
    def reference(self):
        return str(self.id)[:8].upper()

    def recalculate_total(self):
        result = self.items.aggregate(total=models.Sum('total'))['total']
        self.total = result or Decimal('0.00')
        return self.total


class SaleItem(LineItem):
    sale = models.ForeignKey(
        Sale,
        on_delete=models.CASCADE,
        related_name='items'
    )

    class Meta(LineItem.Meta):
        db_table = 'sale_items'
