import pytest
from django.urls import reverse
from rest_framework import status

from apps.quotes.models import Quote, QuoteStatus
from apps.sales.models import Sale


def detail(name, quote, **kwargs):
    return reverse(f'quotes:quote-{name}', kwargs={'pk': quote.id, **kwargs})


# =============================================================================
# CRUD
# =============================================================================

@pytest.mark.django_db
class TestQuoteList:
    """Tests for GET /api/quotes/"""

    def test_lists_company_quotes(self, authenticated_client, quote, other_quote):
        response = authenticated_client.get(reverse('quotes:quote-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [q['id'] for q in response.data['results']] == [str(quote.id)]
        assert response.data['results'][0]['reference'] == str(quote.id)[:8].upper()

    def test_converted_quotes_hidden_by_default(self, authenticated_client, quote):
        Quote.objects.filter(id=quote.id).update(status=QuoteStatus.CONVERTED)

        response = authenticated_client.get(reverse('quotes:quote-list'))
        assert response.data['count'] == 0

        response = authenticated_client.get(reverse('quotes:quote-list'), {'include_converted': 'true'})
        assert response.data['count'] == 1

    def test_unauthenticated(self, api_client):
        response = api_client.get(reverse('quotes:quote-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestQuoteCreate:
    """Tests for POST /api/quotes/"""

    def test_create_with_client_and_items(self, authenticated_client, quote_client, flyers, design):
        data = {
            'client': str(quote_client.id),
            'items': [
                {'product': str(flyers.id), 'quantity': '2'},
                {'service': str(design.id), 'quantity': '1'},
            ],
            'valid_days': 15,
        }
        response = authenticated_client.post(reverse('quotes:quote-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['total'] == '120.00'
        assert response.data['client_name'] == 'Maria Silva'
        assert response.data['status'] == 'pending'
        assert response.data['production_status'] == 'waiting_approval'
        assert len(response.data['items']) == 2

    def test_square_meter_item(self, authenticated_client, banner):
        data = {
            'client_name': 'Balcão',
            'items': [{'product': str(banner.id), 'width': '2.5', 'height': '1.2'}],
        }
        response = authenticated_client.post(reverse('quotes:quote-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['items'][0]['quantity'] == '3.000'
        assert response.data['total'] == '135.00'

    def test_items_required(self, authenticated_client, quote_client):
        data = {'client': str(quote_client.id), 'items': []}
        response = authenticated_client.post(reverse('quotes:quote-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Quote.objects.count() == 0

    def test_client_required(self, authenticated_client):
        data = {'items': [{'name': 'Adesivo', 'quantity': '1', 'unit_price': '5'}]}
        response = authenticated_client.post(reverse('quotes:quote-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_other_company_client_rejected(self, authenticated_client, other_company):
        from apps.clients.models import Client

        foreign = Client.objects.create(company=other_company, name='X', phone='1')
        data = {
            'client': str(foreign.id),
            'items': [{'name': 'Adesivo', 'quantity': '1', 'unit_price': '5'}],
        }
        response = authenticated_client.post(reverse('quotes:quote-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Quote.objects.count() == 0

    def test_oversized_line_total(self, authenticated_client):
        data = {
            'client_name': 'Balcão',
            'items': [{'name': 'Lona', 'quantity': '999999', 'unit_price': '99.999.999,99'}],
        }
        response = authenticated_client.post(reverse('quotes:quote-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Quote.objects.count() == 0

    def test_missing_dimensions(self, authenticated_client, banner):
        data = {'client_name': 'Balcão', 'items': [{'product': str(banner.id)}]}
        response = authenticated_client.post(reverse('quotes:quote-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data


@pytest.mark.django_db
class TestQuoteDetail:
    """Tests for /api/quotes/{id}/"""

    def test_other_company_quote_not_found(self, authenticated_client, other_quote):
        url = reverse('quotes:quote-detail', kwargs={'pk': other_quote.id})

        assert authenticated_client.get(url).status_code == status.HTTP_404_NOT_FOUND
        assert authenticated_client.patch(url, {'notes': 'x'}, format='json').status_code == status.HTTP_404_NOT_FOUND
        assert authenticated_client.delete(url).status_code == status.HTTP_404_NOT_FOUND

    def test_patch_notes_only(self, authenticated_client, quote):
        url = reverse('quotes:quote-detail', kwargs={'pk': quote.id})
        response = authenticated_client.patch(url, {'notes': 'Entregar na loja'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['notes'] == 'Entregar na loja'
        assert response.data['total'] == '150.00'

    def test_patch_invalid_status_writes_nothing(self, authenticated_client, quote):
        url = reverse('quotes:quote-detail', kwargs={'pk': quote.id})
        response = authenticated_client.patch(url, {'status': 'fully_paid', 'notes': 'x'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        quote.refresh_from_db()
        assert quote.notes == ''
        assert quote.status == QuoteStatus.PENDING

    def test_delete(self, authenticated_client, quote):
        url = reverse('quotes:quote-detail', kwargs={'pk': quote.id})

        assert authenticated_client.delete(url).status_code == status.HTTP_204_NO_CONTENT
        assert not Quote.objects.filter(id=quote.id).exists()


# =============================================================================
# Payments
# =============================================================================

@pytest.mark.django_db
class TestPayments:
    """Tests for /api/quotes/{id}/payments/"""

    def test_partial_and_full_payment(self, authenticated_client, quote):
        response = authenticated_client.post(
            detail('payments', quote), {'amount': '100', 'method': 'pix'}, format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['summary']['status'] == 'partially_paid'
        assert response.data['summary']['remaining'] == '50.00'

        response = authenticated_client.post(
            detail('payments', quote), {'amount': '50,00', 'method': 'cash'}, format='json'
        )

        assert response.data['summary']['status'] == 'fully_paid'
        assert response.data['summary']['remaining'] == '0.00'

    def test_zero_amount_rejected(self, authenticated_client, quote):
        response = authenticated_client.post(
            detail('payments', quote), {'amount': '0', 'method': 'pix'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert quote.payments.count() == 0

    @pytest.mark.parametrize('amount', [
        '1e2',
        '1e999999',
        '99999999999999999999999999999',
        '12345678901234,00',
    ])
    def test_malformed_or_oversized_amount(self, authenticated_client, quote, amount):
        response = authenticated_client.post(
            detail('payments', quote), {'amount': amount, 'method': 'pix'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data
        assert quote.payments.count() == 0

    def test_unknown_method_rejected(self, authenticated_client, quote):
        response = authenticated_client.post(
            detail('payments', quote), {'amount': '10', 'method': 'cheque'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_payment(self, authenticated_client, company, quote):
        from apps.quotes.services import add_payment

        payment = add_payment(company=company, quote_id=quote.id, amount='150', method='pix')
        url = detail('delete-payment', quote, payment_id=payment.id)

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'pending'
        assert response.data['paid'] == '0.00'

    def test_delete_unknown_payment(self, authenticated_client, quote):
        url = detail('delete-payment', quote, payment_id='00000000-0000-0000-0000-000000000000')

        assert authenticated_client.delete(url).status_code == status.HTTP_404_NOT_FOUND

    def test_summary(self, authenticated_client, company, quote):
        from apps.quotes.services import add_payment

        add_payment(company=company, quote_id=quote.id, amount='40', method='debit')
        response = authenticated_client.get(detail('summary', quote))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['paid'] == '40.00'
        assert response.data['remaining'] == '110.00'
        assert response.data['payment_count'] == 1


# =============================================================================
# Conversion, production and sharing
# =============================================================================

@pytest.mark.django_db
class TestConvert:
    """Tests for POST /api/quotes/{id}/convert/"""

    def test_convert(self, authenticated_client, quote):
        response = authenticated_client.post(
            detail('convert', quote), {'payment_method': 'pix'}, format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['total'] == '150.00'
        assert str(response.data['quote']) == str(quote.id)
        quote.refresh_from_db()
        assert quote.status == QuoteStatus.CONVERTED

    def test_convert_twice_conflicts(self, authenticated_client, quote):
        authenticated_client.post(detail('convert', quote), {'payment_method': 'pix'}, format='json')
        response = authenticated_client.post(detail('convert', quote), {'payment_method': 'pix'}, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert Sale.objects.count() == 1

    def test_payment_after_conversion_conflicts(self, authenticated_client, quote):
        authenticated_client.post(detail('convert', quote), {'payment_method': 'pix'}, format='json')
        response = authenticated_client.post(
            detail('payments', quote), {'amount': '10', 'method': 'pix'}, format='json'
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_convert_other_company_quote(self, authenticated_client, other_quote):
        response = authenticated_client.post(
            detail('convert', other_quote), {'payment_method': 'pix'}, format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestProductionStatusEndpoint:
    """Tests for POST /api/quotes/{id}/production_status/"""

    def test_ready_returns_notification(self, authenticated_client, quote):
        response = authenticated_client.post(
            detail('production-status', quote), {'production_status': 'ready'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['production_status'] == 'ready'
        assert response.data['notification']['url'].startswith('https://wa.me/55')

    def test_in_production_has_no_notification(self, authenticated_client, quote):
        response = authenticated_client.post(
            detail('production-status', quote), {'production_status': 'in_production'}, format='json'
        )

        assert response.data['notification'] is None

    def test_unknown_status(self, authenticated_client, quote):
        response = authenticated_client.post(
            detail('production-status', quote), {'production_status': 'lost'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_backwards_move_rejected_in_forward_only_mode(self, authenticated_client, quote, settings):
        settings.PRODUCTION_STATUS_FORWARD_ONLY = True
        authenticated_client.post(
            detail('production-status', quote), {'production_status': 'finishing'}, format='json'
        )
        response = authenticated_client.post(
            detail('production-status', quote), {'production_status': 'approved'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestShareLink:
    """Tests for GET /api/quotes/{id}/share_link/"""

    def test_share_link(self, authenticated_client, quote, settings):
        settings.TRACKING_BASE_URL = 'https://grafica.example.com'
        response = authenticated_client.get(detail('share-link', quote))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['url'].startswith('https://wa.me/5511987654321?text=')
        assert response.data['tracking_url'] == f'https://grafica.example.com/acompanhar/{quote.id}/'
        assert f'#{quote.reference}' in response.data['message']
        assert 'R$ 150,00' in response.data['message']

    def test_share_link_without_phone(self, authenticated_client, quote):
        Quote.objects.filter(id=quote.id).update(client_phone='')

        response = authenticated_client.get(detail('share-link', quote))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
