import pytest
from apps.accounts.models import User, Company


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        display_name='Inactive User',
        is_active=False,
    )


@pytest.fixture
def inactive_company_user(db):
    """User whose company exists but has been deactivated."""
    Company.objects.create(
        name='Gráfica Cancelada',
        email='cancelled@grafica.com.br',
        is_active=False,
    )
    return User.objects.create_user(
        email='cancelled@grafica.com.br',
        password='TestPass123!',
    )
