from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import CompanyOwnedModel, MeasurementUnit


class Product(CompanyOwnedModel):
    """Sellable item priced per measurement unit."""

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    measurement_unit = models.CharField(
        max_length=20,
        choices=MeasurementUnit.choices,
        default=MeasurementUnit.UNIT
    )
    image = models.URLField(max_length=500, blank=True)

    class Meta(CompanyOwnedModel.Meta):
        db_table = 'products'
        indexes = [
            models.Index(fields=['company', 'category'], name='products_company_cat_idx'),
        ]

    def __str__(self):
        return self.name


class Service(CompanyOwnedModel):
    """Labour offered by the shop (design, installation, finishing)."""

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    # Free text, e.g. "2 dias" or "3h"
    duration = models.CharField(max_length=50, blank=True)

    class Meta(CompanyOwnedModel.Meta):
        db_table = 'services'

    def __str__(self):
        return self.name
