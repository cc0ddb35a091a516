from django.db.models import Q
from rest_framework import viewsets

from apps.core.mixins import CompanyScopedMixin
from apps.core.pagination import StandardPagination
from .models import Client
from .serializers import ClientSerializer


class ClientViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    """
    ViewSet for Client CRUD operations.

    list: Clients of the caller's company, newest first (``?search=`` filters)
    create: Register a client for the caller's company
    retrieve / update / partial_update / destroy: company records only

    Deleting a client keeps its quotes and sales; they retain the
    client name and phone snapshots.
    """

    queryset = Client.objects.all()
    serializer_class = ClientSerializer
    pagination_class = StandardPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) | Q(phone__icontains=search) | Q(email__icontains=search)
            )
        return queryset
