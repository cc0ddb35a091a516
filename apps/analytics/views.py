from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAuthorizedCompanyMember
from apps.accounts.services import get_company_for_user
from apps.clients.models import Client
from apps.quotes.models import Quote
from apps.sales.models import Sale
from .reports import ReportCalculator
from .serializers import (
    # Input serializers
    ReportQuerySerializer,
    # Response serializers
    ReportResponseSerializer,
    DashboardResponseSerializer,
    ErrorSerializer,
)
from .exceptions import AnalyticsServiceError


@extend_schema(
    parameters=[
        OpenApiParameter('period', OpenApiTypes.STR, description='Month period (YYYY-MM)'),
        OpenApiParameter('start_date', OpenApiTypes.DATE, description='Start date (YYYY-MM-DD)'),
        OpenApiParameter('end_date', OpenApiTypes.DATE, description='End date, inclusive (YYYY-MM-DD)'),
    ],
    responses={
        200: ReportResponseSerializer,
        400: ErrorSerializer,
    },
    description="Sales and quote summaries for a date range, plus trailing six-month charts.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthorizedCompanyMember])
def reports(request):
    """Reports page data - thin HTTP handler."""
    query_serializer = ReportQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data
    start, end = params.get('start_date'), params.get('end_date')

    company = get_company_for_user(request.user)
    sales = list(Sale.objects.filter(company=company))
    quotes = list(Quote.objects.filter(company=company))

    try:
        sales_in_range = ReportCalculator.filter_by_date_range(sales, start, end)
        quotes_in_range = ReportCalculator.filter_by_date_range(quotes, start, end)
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    data = {
        'start_date': start,
        'end_date': end,
        'sales': ReportCalculator.sales_summary(sales_in_range),
        'quotes': ReportCalculator.quote_summary(quotes_in_range),
        'monthly_sales': ReportCalculator.monthly_buckets(sales),
        'monthly_quotes': ReportCalculator.monthly_buckets(quotes),
    }
    return Response(ReportResponseSerializer(data).data)


@extend_schema(
    responses={200: DashboardResponseSerializer},
    description="Dashboard figures: clients, pending quotes, sales this month and monthly charts.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthorizedCompanyMember])
def dashboard(request):
    """Get dashboard data for the caller's company."""
    company = get_company_for_user(request.user)

    data = ReportCalculator.dashboard(
        clients=list(Client.objects.filter(company=company)),
        quotes=list(Quote.objects.filter(company=company)),
        sales=list(Sale.objects.filter(company=company)),
    )
    return Response(DashboardResponseSerializer(data).data)
