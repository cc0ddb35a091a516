"""
View mixins shared by the company-scoped apps.
"""
from apps.accounts.permissions import IsAuthorizedCompanyMember
from apps.accounts.services import get_company_for_user


class CompanyScopedMixin:
    """
    Restrict a view to the records of the caller's company.

    Every queryset is filtered by ``company``, so records owned by another
    company resolve to 404 instead of leaking. New records are stamped with
    the caller's company.

    Usage:
        class ClientViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
            queryset = Client.objects.all()
    """

    permission_classes = [IsAuthorizedCompanyMember]

    def get_company(self):
        # Schema generation runs without a real user
        if getattr(self, 'swagger_fake_view', False):
            return None
        if not hasattr(self, '_company'):
            self._company = get_company_for_user(self.request.user)
        return self._company

    def get_queryset(self):
        queryset = super().get_queryset()
        company = self.get_company()
        if company is None:
            return queryset.none()
        return queryset.filter(company=company)

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['company'] = self.get_company()
        return context

    def perform_create(self, serializer):
        serializer.save(company=self.get_company())
