import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.quotes.services import (
    create_quote,
    convert_quote_to_sale,
    set_quote_production_status,
)
from apps.tracking.services import build_timeline


class TestTimeline:

    def test_in_production(self):
        timeline = build_timeline('in_production')

        assert [step['status'] for step in timeline] == [
            'waiting_approval', 'approved', 'in_production', 'finishing', 'ready', 'delivered',
        ]
        assert [step['completed'] for step in timeline] == [True, True, False, False, False, False]
        assert [step['current'] for step in timeline] == [False, False, True, False, False, False]

    def test_delivered_is_completed(self):
        timeline = build_timeline('delivered')

        assert all(step['completed'] for step in timeline)
        assert timeline[-1]['current']


@pytest.mark.django_db
class TestTrackOrder:
    """Tests for the public tracking endpoint."""

    def test_found_without_authentication(self, api_client, company, tracked_quote):
        set_quote_production_status(company=company, quote_id=tracked_quote.id, production_status='finishing')
        url = reverse('tracking:track-order', kwargs={'quote_id': tracked_quote.id})

        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['found'] is True
        assert response.data['reference'] == tracked_quote.reference
        assert response.data['total'] == '130.00'
        assert response.data['production_status_label'] == 'Acabamento'
        assert len(response.data['items']) == 2
        assert len(response.data['timeline']) == 6

    def test_does_not_expose_payments_or_phone(self, api_client, tracked_quote):
        url = reverse('tracking:track-order', kwargs={'quote_id': tracked_quote.id})

        response = api_client.get(url)

        assert 'client_phone' not in response.data
        assert 'payments' not in response.data

    def test_public_route(self, api_client, tracked_quote):
        url = reverse('public-track-order', kwargs={'quote_id': tracked_quote.id})

        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(tracked_quote.id)

    @pytest.mark.parametrize('quote_id', ['not-a-uuid', '00000000-0000-0000-0000-000000000000'])
    def test_not_found(self, api_client, quote_id):
        url = reverse('tracking:track-order', kwargs={'quote_id': quote_id})

        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['found'] is False


@pytest.mark.django_db
class TestActivities:
    """Tests for GET /api/activities/"""

    def test_board(self, authenticated_client, company, tracked_quote, other_quote_in_production):
        waiting = create_quote(
            company=company,
            client_name='Sem aprovação',
            items=[{'name': 'Flyer', 'quantity': Decimal('1'), 'unit_price': Decimal('5.00')}],
        )
        set_quote_production_status(company=company, quote_id=tracked_quote.id, production_status='approved')
        converted = create_quote(
            company=company,
            client_name='Convertido',
            items=[{'name': 'Flyer', 'quantity': Decimal('1'), 'unit_price': Decimal('5.00')}],
        )
        set_quote_production_status(company=company, quote_id=converted.id, production_status='in_production')
        sale = convert_quote_to_sale(company=company, quote_id=converted.id, payment_method='pix')

        response = authenticated_client.get(reverse('tracking:activities'))

        assert response.status_code == status.HTTP_200_OK
        quote_ids = [q['id'] for q in response.data['quotes']]
        assert quote_ids == [str(tracked_quote.id)]
        assert str(waiting.id) not in quote_ids
        assert str(other_quote_in_production.id) not in quote_ids
        assert [s['id'] for s in response.data['sales']] == [str(sale.id)]
        assert response.data['sales'][0]['kind'] == 'sale'

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('tracking:activities'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
