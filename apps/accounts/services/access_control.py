"""
Authorization gate.

Authentication only proves who the user is. Access to the print shop
records additionally requires an active Company allow-listed under the
user's email. The decision is re-evaluated on every request; nothing is
cached across requests.
"""

from typing import Optional

from apps.accounts.models import AccessState, Company

from .exceptions import CompanyNotFoundError


def find_company_for_user(user) -> Optional[Company]:
    """Return the active allow-listed company for ``user`` or None."""
    if user is None or not user.is_authenticated or not user.email:
        return None
    return (
        Company.objects
        .filter(email__iexact=user.email, is_active=True)
        .first()
    )


def get_company_for_user(user) -> Company:
    """
    Return the company whose records ``user`` may access.

    Raises:
        CompanyNotFoundError: If the user is not on the allow-list
    """
    company = find_company_for_user(user)
    if company is None:
        raise CompanyNotFoundError("No active company is authorized for this user")
    return company


def resolve_access_state(user) -> str:
    """
    Map a request user onto the gate states.

    Returns one of ``AccessState`` values:
        - unauthenticated: no valid session/token
        - unauthorized: signed in, but not allow-listed or inactive
        - authorized: signed in and allow-listed
    """
    if user is None or not user.is_authenticated:
        return AccessState.UNAUTHENTICATED
    if find_company_for_user(user) is None:
        return AccessState.UNAUTHORIZED
    return AccessState.AUTHORIZED
