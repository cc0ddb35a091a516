"""
Permission classes for the authorization gate.
"""
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import BasePermission

from .models import AccessState
from .services import resolve_access_state


class SubscriptionRequired(PermissionDenied):
    """Signed-in user whose email is not on the company allow-list."""
    default_detail = 'Your email is not authorized yet. Subscribe to access the system.'
    default_code = 'subscription_required'


class IsAuthorizedCompanyMember(BasePermission):
    """
    Permission: user is authenticated AND allow-listed for an active company.

    - unauthenticated requests fail with 401 (DRF's NotAuthenticated)
    - authenticated but not allow-listed requests fail with 403 and the
      ``subscription_required`` code, which clients turn into the
      upgrade call to action

    Usage:
        class QuoteViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
            permission_classes = [IsAuthorizedCompanyMember]
    """

    def has_permission(self, request, view):
        state = resolve_access_state(request.user)
        if state == AccessState.UNAUTHENTICATED:
            return False
        if state == AccessState.UNAUTHORIZED:
            raise SubscriptionRequired()
        return True
