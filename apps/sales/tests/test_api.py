import pytest
from django.urls import reverse
from rest_framework import status

from apps.sales.models import Sale, SaleStatus


def detail(name, sale):
    return reverse(f'sales:sale-{name}', kwargs={'pk': sale.id})


@pytest.mark.django_db
class TestSaleList:
    """Tests for GET /api/sales/"""

    def test_lists_company_sales(self, authenticated_client, sale, other_sale):
        response = authenticated_client.get(reverse('sales:sale-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['id'] == str(sale.id)

    def test_filter_by_status(self, authenticated_client, sale):
        Sale.objects.filter(id=sale.id).update(status=SaleStatus.PAID)

        response = authenticated_client.get(reverse('sales:sale-list'), {'status': 'pending'})
        assert response.data['count'] == 0

        response = authenticated_client.get(reverse('sales:sale-list'), {'status': 'paid'})
        assert response.data['count'] == 1

    def test_subscription_required(self, unauthorized_client):
        response = unauthorized_client.get(reverse('sales:sale-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestSaleCreate:
    """Tests for POST /api/sales/"""

    def test_create(self, authenticated_client, sale_client, stickers):
        data = {
            'client': str(sale_client.id),
            'payment_method': 'credit',
            'items': [{'product': str(stickers.id), 'quantity': '3'}],
        }
        response = authenticated_client.post(reverse('sales:sale-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['total'] == '75.00'
        assert response.data['client_name'] == 'João Pereira'
        assert response.data['quote'] is None

    def test_cancelled_not_allowed_on_create(self, authenticated_client, stickers):
        data = {
            'client_name': 'Balcão',
            'payment_method': 'cash',
            'status': 'cancelled',
            'items': [{'product': str(stickers.id)}],
        }
        response = authenticated_client.post(reverse('sales:sale-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_invalid_payment_method(self, authenticated_client, stickers):
        data = {
            'client_name': 'Balcão',
            'payment_method': 'cheque',
            'items': [{'product': str(stickers.id)}],
        }
        response = authenticated_client.post(reverse('sales:sale-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestSaleUpdate:
    """Tests for PATCH/DELETE /api/sales/{id}/"""

    def test_patch(self, authenticated_client, sale):
        url = reverse('sales:sale-detail', kwargs={'pk': sale.id})
        response = authenticated_client.patch(url, {'notes': 'Retirar sexta'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['notes'] == 'Retirar sexta'

    def test_reopen_cancelled(self, authenticated_client, sale):
        Sale.objects.filter(id=sale.id).update(status=SaleStatus.CANCELLED)
        url = reverse('sales:sale-detail', kwargs={'pk': sale.id})

        response = authenticated_client.patch(url, {'status': 'pending'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_other_company_sale(self, authenticated_client, other_sale):
        url = reverse('sales:sale-detail', kwargs={'pk': other_sale.id})

        assert authenticated_client.patch(url, {'notes': 'x'}, format='json').status_code == status.HTTP_404_NOT_FOUND
        assert authenticated_client.delete(url).status_code == status.HTTP_404_NOT_FOUND

    def test_delete(self, authenticated_client, sale):
        url = reverse('sales:sale-detail', kwargs={'pk': sale.id})

        assert authenticated_client.delete(url).status_code == status.HTTP_204_NO_CONTENT
        assert not Sale.objects.filter(id=sale.id).exists()


@pytest.mark.django_db
class TestSaleActions:

    def test_mark_paid(self, authenticated_client, sale):
        response = authenticated_client.post(detail('mark-paid', sale))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'paid'

    def test_mark_paid_cancelled(self, authenticated_client, sale):
        Sale.objects.filter(id=sale.id).update(status=SaleStatus.CANCELLED)

        response = authenticated_client.post(detail('mark-paid', sale))

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_production_status_syncs_quote(self, authenticated_client, converted):
        quote, sale = converted

        response = authenticated_client.post(
            detail('production-status', sale), {'production_status': 'ready'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['notification'] is not None
        quote.refresh_from_db()
        assert quote.production_status == 'ready'
