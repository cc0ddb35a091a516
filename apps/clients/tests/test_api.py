import pytest
from django.urls import reverse
from rest_framework import status
from apps.clients.models import Client


@pytest.mark.django_db
class TestClientList:
    """Tests for GET /api/clients/"""

    def test_lists_only_company_clients(self, authenticated_client, client_record, other_client_record):
        response = authenticated_client.get(reverse('clients:client-list'))

        assert response.status_code == status.HTTP_200_OK
        ids = [c['id'] for c in response.data['results']]
        assert ids == [str(client_record.id)]

    def test_newest_first(self, authenticated_client, company, client_record):
        newer = Client.objects.create(company=company, name='Ana', phone='11 1111-1111')

        response = authenticated_client.get(reverse('clients:client-list'))

        ids = [c['id'] for c in response.data['results']]
        assert ids[0] == str(newer.id)

    def test_search(self, authenticated_client, company, client_record):
        Client.objects.create(company=company, name='Pedro', phone='11 2222-2222')

        response = authenticated_client.get(reverse('clients:client-list'), {'search': 'maria'})

        assert [c['name'] for c in response.data['results']] == ['Maria Silva']


@pytest.mark.django_db
class TestClientCreate:
    """Tests for POST /api/clients/"""

    def test_create_stamps_company(self, authenticated_client, company):
        response = authenticated_client.post(reverse('clients:client-list'), {
            'name': 'Carlos',
            'phone': '11 90000-0000',
        })

        assert response.status_code == status.HTTP_201_CREATED
        assert Client.objects.get(id=response.data['id']).company == company

    def test_phone_required(self, authenticated_client):
        response = authenticated_client.post(reverse('clients:client-list'), {'name': 'Carlos'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'phone' in response.data

    def test_invalid_cpf(self, authenticated_client):
        response = authenticated_client.post(reverse('clients:client-list'), {
            'name': 'Carlos',
            'phone': '11 90000-0000',
            'cpf_cnpj': '123',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestClientDetail:
    """Tests for /api/clients/{id}/"""

    def test_partial_update_changes_only_sent_fields(self, authenticated_client, client_record):
        url = reverse('clients:client-detail', kwargs={'pk': client_record.id})
        response = authenticated_client.patch(url, {'address': 'Rua A, 10'})

        assert response.status_code == status.HTTP_200_OK
        client_record.refresh_from_db()
        assert client_record.address == 'Rua A, 10'
        assert client_record.name == 'Maria Silva'

    def test_invalid_patch_writes_nothing(self, authenticated_client, client_record):
        url = reverse('clients:client-detail', kwargs={'pk': client_record.id})
        response = authenticated_client.patch(url, {'name': '  ', 'address': 'Rua B'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        client_record.refresh_from_db()
        assert client_record.address == ''

    def test_other_company_record_is_not_found(self, authenticated_client, other_client_record):
        url = reverse('clients:client-detail', kwargs={'pk': other_client_record.id})

        assert authenticated_client.get(url).status_code == status.HTTP_404_NOT_FOUND
        assert authenticated_client.delete(url).status_code == status.HTTP_404_NOT_FOUND
        assert Client.objects.filter(id=other_client_record.id).exists()

    def test_delete(self, authenticated_client, client_record):
        url = reverse('clients:client-detail', kwargs={'pk': client_record.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Client.objects.filter(id=client_record.id).exists()
