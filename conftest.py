import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Company


def _bearer(client, user):
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def company(db):
    """Allow-listed print shop."""
    return Company.objects.create(
        name='Gráfica Teste',
        email='owner@grafica.com.br',
    )


@pytest.fixture
def user(db, company):
    """User whose email is on the allow-list."""
    return User.objects.create_user(
        email='owner@grafica.com.br',
        password='TestPass123!',
        display_name='Owner',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an API client authenticated as an authorized user."""
    return _bearer(api_client, user)


@pytest.fixture
def other_company(db):
    """A second company whose records must stay invisible."""
    return Company.objects.create(
        name='Outra Gráfica',
        email='other@grafica.com.br',
    )


@pytest.fixture
def other_user(db, other_company):
    return User.objects.create_user(
        email='other@grafica.com.br',
        password='OtherPass123!',
        display_name='Other Owner',
    )


@pytest.fixture
def other_client(other_user):
    """API client authorized for ``other_company``."""
    return _bearer(APIClient(), other_user)


@pytest.fixture
def unauthorized_user(db):
    """Signed-in user without an allow-list entry."""
    return User.objects.create_user(
        email='stranger@example.com',
        password='TestPass123!',
        display_name='Stranger',
    )


@pytest.fixture
def unauthorized_client(unauthorized_user):
    """API client with a valid token but no company access."""
    return _bearer(APIClient(), unauthorized_user)
