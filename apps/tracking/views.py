from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAuthorizedCompanyMember
from apps.accounts.services import get_company_for_user
from .serializers import OrderTrackingSerializer, OrderNotFoundSerializer, ActivitiesSerializer
from .services import get_order_tracking, list_production_activities, OrderNotFoundError


@extend_schema(
    responses={
        200: OrderTrackingSerializer,
        404: OrderNotFoundSerializer,
    },
    description="Public order tracking: production timeline and items of a quote. No authentication.",
    tags=['tracking'],
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def track_order(request, quote_id):
    """Follow an order by its quote id."""
    try:
        tracking = get_order_tracking(quote_id=quote_id)
    except OrderNotFoundError as e:
        return Response(
            {'found': False, 'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response(OrderTrackingSerializer(tracking).data)


@extend_schema(
    responses={200: ActivitiesSerializer},
    description="Production board: quotes in production (not converted) and sales with a production status.",
    tags=['tracking'],
)
@api_view(['GET'])
@permission_classes([IsAuthorizedCompanyMember])
def activities(request):
    """Work in progress for the caller's company."""
    company = get_company_for_user(request.user)
    board = list_production_activities(company=company)
    return Response(ActivitiesSerializer(board).data)
