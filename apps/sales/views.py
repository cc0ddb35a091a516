from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.mixins import CompanyScopedMixin
from apps.core.pagination import StandardPagination
from apps.catalog.services import CatalogServiceError
from apps.quotes.serializers import (
    ProductionStatusUpdateSerializer,
    ProductionStatusResponseSerializer,
)
from apps.quotes.services import (
    set_sale_production_status,
    production_notification,
    QuotesServiceError,
    ClientNotFoundError,
    SaleNotFoundError,
)
from .models import Sale
from .serializers import SaleSerializer, SaleCreateSerializer, SaleUpdateSerializer
from .services import (
    create_sale,
    update_sale,
    mark_sale_paid,
    delete_sale,
    InvalidSaleStatusError,
)


class SaleViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    """
    ViewSet for sales.

    list: Sales of the caller's company, newest first (``?status=`` filters)
    create: Register a sale entered directly
    update / partial_update: Payment method, status, delivery date, notes
    destroy: Delete a sale
    """

    queryset = Sale.objects.prefetch_related('items')
    serializer_class = SaleSerializer
    pagination_class = StandardPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        sale_status = self.request.query_params.get('status')
        if self.action == 'list' and sale_status:
            queryset = queryset.filter(status=sale_status)
        return queryset

    def _render(self, sale, status_code=status.HTTP_200_OK):
        sale = self.get_queryset().get(pk=sale.pk)
        return Response(SaleSerializer(sale).data, status=status_code)

    @extend_schema(request=SaleCreateSerializer, responses={201: SaleSerializer})
    def create(self, request, *args, **kwargs):
        """Create a sale with its items."""
        serializer = SaleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            sale = create_sale(
                company=self.get_company(),
                items=data['items'],
                payment_method=data['payment_method'],
                client_id=data.get('client'),
                client_name=data.get('client_name', ''),
                client_phone=data.get('client_phone', ''),
                status=data.get('status', 'pending'),
                delivery_date=data.get('delivery_date'),
                notes=data.get('notes', ''),
            )
        except (ClientNotFoundError, CatalogServiceError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._render(sale, status.HTTP_201_CREATED)

    @extend_schema(request=SaleUpdateSerializer, responses={200: SaleSerializer})
    def update(self, request, *args, **kwargs):
        serializer = SaleUpdateSerializer(data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)

        try:
            sale = update_sale(company=self.get_company(), sale_id=kwargs['pk'], **serializer.validated_data)
        except SaleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidSaleStatusError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._render(sale)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_sale(company=self.get_company(), sale_id=kwargs['pk'])
        except SaleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: SaleSerializer})
    @action(detail=True, methods=['post'])
    def mark_paid(self, request, pk=None):
        """Mark the sale as paid."""
        try:
            sale = mark_sale_paid(company=self.get_company(), sale_id=pk)
        except SaleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidSaleStatusError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._render(sale)

    @extend_schema(
        request=ProductionStatusUpdateSerializer,
        responses={200: ProductionStatusResponseSerializer},
    )
    @action(detail=True, methods=['post', 'patch'])
    def production_status(self, request, pk=None):
        """Move the sale to another production stage; the linked quote follows."""
        serializer = ProductionStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            sale = set_sale_production_status(
                company=self.get_company(),
                sale_id=pk,
                production_status=serializer.validated_data['production_status'],
            )
        except SaleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except QuotesServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'id': sale.id,
            'production_status': sale.production_status,
            'notification': production_notification(sale),
        })
