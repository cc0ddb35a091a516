"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    CompanyNotFoundError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .access_control import (
    find_company_for_user,
    get_company_for_user,
    resolve_access_state,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'CompanyNotFoundError',
    # Services
    'register_user',
    'authenticate_user',
    'find_company_for_user',
    'get_company_for_user',
    'resolve_access_state',
]
