from django.db import models

from apps.core.models import CompanyOwnedModel


class Client(CompanyOwnedModel):
    """Customer of the print shop."""

    name = models.CharField(max_length=200)
    phone = models.CharField(max_length=30)
    email = models.EmailField(blank=True)
    address = models.CharField(max_length=300, blank=True)
    cpf_cnpj = models.CharField(max_length=20, blank=True)

    class Meta(CompanyOwnedModel.Meta):
        db_table = 'clients'
        indexes = [
            models.Index(fields=['company', 'name'], name='clients_company_name_idx'),
            models.Index(fields=['company', 'created_at'], name='clients_company_created_idx'),
        ]

    def __str__(self):
        return self.name
