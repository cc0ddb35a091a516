from decimal import Decimal
import uuid

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Sum

from apps.core.models import CompanyOwnedModel, LineItem, PaymentMethod, ProductionStatus


class QuoteStatus(models.TextChoices):
    PENDING = 'pending', 'Pendente'
    APPROVED = 'approved', 'Aprovado'
    REJECTED = 'rejected', 'Rejeitado'
    CONVERTED = 'converted', 'Convertido em venda'
    PARTIALLY_PAID = 'partially_paid', 'Parcialmente pago'
    FULLY_PAID = 'fully_paid', 'Pago'


class Quote(CompanyOwnedModel):
    """
    Priced proposal for a client.

    ``total`` is the sum of the item totals and is recomputed whenever the
    items are written. ``status`` tracks approval and payment; once the quote
    is converted into a sale it is frozen.
    """

    client = models.ForeignKey(
        'clients.Client',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='quotes'
    )
    # Snapshots, kept when the client record is deleted
    client_name = models.CharField(max_length=200)
    client_phone = models.CharField(max_length=30, blank=True)

    total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    status = models.CharField(
        max_length=20,
        choices=QuoteStatus.choices,
        default=QuoteStatus.PENDING
    )
    production_status = models.CharField(
        max_length=20,
        choices=ProductionStatus.choices,
        default=ProductionStatus.WAITING_APPROVAL
    )
    valid_until = models.DateField()
    delivery_date = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True)

    class Meta(CompanyOwnedModel.Meta):
        db_table = 'quotes'
        indexes = [
            models.Index(fields=['company', 'status'], name='quotes_company_status_idx'),
            models.Index(fields=['company', 'created_at'], name='quotes_company_created_idx'),
        ]

    def __str__(self):
        return f"Quote {self.reference} - {self.client_name}"

    @property
    def reference(self):
        """Short public reference: first 8 characters of the id, uppercase."""
        return str(self.id)[:8].upper()

    @property
    def is_converted(self):
        return self.status == QuoteStatus.CONVERTED

    def get_amount_paid(self):
        """Sum of all recorded payments."""
        result = self.payments.aggregate(paid=Sum('amount'))['paid']
        return result or Decimal('0.00')

    def recalculate_total(self):
        """Recompute ``total`` from the stored items (does not save)."""
        result = self.items.aggregate(total=Sum('total'))['total']
        self.total = result or Decimal('0.00')
        return self.total


class QuoteItem(LineItem):
    quote = models.ForeignKey(
        Quote,
        on_delete=models.CASCADE,
        related_name='items'
    )

    class Meta(LineItem.Meta):
        db_table = 'quote_items'


class Payment(models.Model):
    """Partial or full payment received against a quote."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    quote = models.ForeignKey(
        Quote,
        on_delete=models.CASCADE,
        related_name='payments'
    )
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'quote_payments'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.amount} ({self.method}) for {self.quote_id}"
