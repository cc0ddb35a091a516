import pytest
from apps.clients.models import Client


@pytest.fixture
def client_record(company):
    """Client owned by the authorized company."""
    return Client.objects.create(
        company=company,
        name='Maria Silva',
        phone='(11) 98765-4321',
        email='maria@example.com',
    )


@pytest.fixture
def other_client_record(other_company):
    """Client owned by another company."""
    return Client.objects.create(
        company=other_company,
        name='João Souza',
        phone='21 99999-0000',
    )
