from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.core.mixins import CompanyScopedMixin
from apps.core.pagination import StandardPagination
from apps.catalog.services import CatalogServiceError
from apps.sales.serializers import SaleSerializer
from apps.tracking.services import build_quote_share_link, MissingPhoneError
from .models import Quote, QuoteStatus
from .serializers import (
    QuoteSerializer,
    QuoteCreateSerializer,
    QuoteUpdateSerializer,
    PaymentSerializer,
    PaymentCreateSerializer,
    PaymentSummarySerializer,
    ConvertQuoteSerializer,
    ProductionStatusUpdateSerializer,
    ProductionStatusResponseSerializer,
    ShareLinkSerializer,
)
from .services import (
    create_quote,
    update_quote,
    delete_quote,
    get_quote,
    add_payment,
    remove_payment,
    payment_summary,
    convert_quote_to_sale,
    set_quote_production_status,
    production_notification,
    # Exceptions
    QuotesServiceError,
    QuoteNotFoundError,
    ClientNotFoundError,
    QuoteAlreadyConvertedError,
    PaymentNotFoundError,
)


def _truthy(value):
    return str(value).lower() in ('1', 'true', 'yes')


class QuoteViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    """
    ViewSet for quotes.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Active quotes (converted ones only with ``?include_converted=true``)
    create: Create a quote with its items
    retrieve: Get a quote with items, payments and balance
    update / partial_update: Change client, items, validity, notes or status
    destroy: Delete a quote
    """

    queryset = Quote.objects.prefetch_related('items', 'payments')
    serializer_class = QuoteSerializer
    pagination_class = StandardPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        params = self.request.query_params
        if not _truthy(params.get('include_converted', '')):
            queryset = queryset.exclude(status=QuoteStatus.CONVERTED)
        if params.get('status'):
            queryset = queryset.filter(status=params['status'])
        if params.get('search'):
            queryset = queryset.filter(client_name__icontains=params['search'])
        return queryset

    def _render(self, quote, status_code=status.HTTP_200_OK):
        quote = self.get_queryset().get(pk=quote.pk)
        return Response(QuoteSerializer(quote).data, status=status_code)

    @extend_schema(
        parameters=[
            OpenApiParameter('include_converted', bool, description='Include converted quotes'),
            OpenApiParameter('status', str, description='Filter by status'),
            OpenApiParameter('search', str, description='Filter by client name'),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=QuoteCreateSerializer, responses={201: QuoteSerializer})
    def create(self, request, *args, **kwargs):
        """Create a new quote."""
        serializer = QuoteCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            quote = create_quote(
                company=self.get_company(),
                items=data['items'],
                client_id=data.get('client'),
                client_name=data.get('client_name', ''),
                client_phone=data.get('client_phone', ''),
                valid_days=data.get('valid_days'),
                delivery_date=data.get('delivery_date'),
                notes=data.get('notes', ''),
            )
        except (ClientNotFoundError, CatalogServiceError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._render(quote, status.HTTP_201_CREATED)

    @extend_schema(request=QuoteUpdateSerializer, responses={200: QuoteSerializer})
    def update(self, request, *args, **kwargs):
        """Update a quote (PUT replaces the sent fields, PATCH is partial)."""
        serializer = QuoteUpdateSerializer(data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)

        changes = dict(serializer.validated_data)
        if 'client' in changes:
            changes['client_id'] = changes.pop('client')

        try:
            quote = update_quote(company=self.get_company(), quote_id=kwargs['pk'], **changes)
        except QuoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except QuoteAlreadyConvertedError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except (QuotesServiceError, CatalogServiceError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._render(quote)

    def destroy(self, request, *args, **kwargs):
        """Delete a quote."""
        try:
            delete_quote(company=self.get_company(), quote_id=kwargs['pk'])
        except QuoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # =========================================================================
    # Payments
    # =========================================================================

    @extend_schema(request=PaymentCreateSerializer, responses={201: PaymentSerializer})
    @action(detail=True, methods=['post'])
    def payments(self, request, pk=None):
        """Record a payment; the quote status follows the amount paid."""
        serializer = PaymentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            payment = add_payment(
                company=self.get_company(),
                quote_id=pk,
                amount=serializer.validated_data['amount'],
                method=serializer.validated_data['method'],
            )
        except QuoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except QuoteAlreadyConvertedError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except QuotesServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'payment': PaymentSerializer(payment).data,
            'summary': PaymentSummarySerializer(payment_summary(payment.quote)).data,
        }, status=status.HTTP_201_CREATED)

    @extend_schema(request=None, responses={200: PaymentSummarySerializer})
    @action(
        detail=True,
        methods=['delete'],
        url_path=r'payments/(?P<payment_id>[0-9a-fA-F-]{36})',
        url_name='delete-payment',
    )
    def delete_payment(self, request, pk=None, payment_id=None):
        """Remove a payment and recompute the status."""
        try:
            quote = remove_payment(company=self.get_company(), quote_id=pk, payment_id=payment_id)
        except (QuoteNotFoundError, PaymentNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except QuoteAlreadyConvertedError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(PaymentSummarySerializer(payment_summary(quote)).data)

    @extend_schema(responses={200: PaymentSummarySerializer})
    @action(detail=True, methods=['get'])
    def summary(self, request, pk=None):
        """Total, paid, remaining and overpaid amounts."""
        try:
            quote = get_quote(company=self.get_company(), quote_id=pk)
        except QuoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(PaymentSummarySerializer(payment_summary(quote)).data)

    # =========================================================================
    # Conversion & production
    # =========================================================================

    @extend_schema(request=ConvertQuoteSerializer, responses={201: SaleSerializer})
    @action(detail=True, methods=['post'])
    def convert(self, request, pk=None):
        """Convert the quote into a sale."""
        serializer = ConvertQuoteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            sale = convert_quote_to_sale(
                company=self.get_company(),
                quote_id=pk,
                payment_method=serializer.validated_data['payment_method'],
            )
        except QuoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except QuoteAlreadyConvertedError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except QuotesServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SaleSerializer(sale).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=ProductionStatusUpdateSerializer,
        responses={200: ProductionStatusResponseSerializer},
    )
    @action(detail=True, methods=['post', 'patch'])
    def production_status(self, request, pk=None):
        """
        Move the quote to another production stage.

        Linked sales follow. For ``ready`` and ``delivered`` the response
        carries a click-to-chat ``notification`` link for the client.
        """
        serializer = ProductionStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            quote = set_quote_production_status(
                company=self.get_company(),
                quote_id=pk,
                production_status=serializer.validated_data['production_status'],
            )
        except QuoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except QuotesServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'id': quote.id,
            'production_status': quote.production_status,
            'notification': production_notification(quote),
        })

    @extend_schema(responses={200: ShareLinkSerializer})
    @action(detail=True, methods=['get'])
    def share_link(self, request, pk=None):
        """WhatsApp link pre-filled with the quote for its client."""
        try:
            quote = get_quote(company=self.get_company(), quote_id=pk)
            link = build_quote_share_link(quote)
        except QuoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except MissingPhoneError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(link)
