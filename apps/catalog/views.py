from rest_framework import viewsets

from apps.core.mixins import CompanyScopedMixin
from apps.core.pagination import StandardPagination
from .models import Product, Service
from .serializers import ProductSerializer, ServiceSerializer


class ProductViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    """
    Product catalog of the caller's company.

    Supports ``?category=`` filtering. Editing a price never changes
    existing quote or sale lines.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = StandardPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        category = self.request.query_params.get('category')
        if category:
            queryset = queryset.filter(category__iexact=category)
        return queryset


class ServiceViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    """Service catalog of the caller's company."""

    queryset = Service.objects.all()
    serializer_class = ServiceSerializer
    pagination_class = StandardPagination
