from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.views import ErrorResponseSerializer
from .serializers import SessionUrlSerializer
from .services import (
    start_checkout,
    open_billing_portal,
    BillingDisabledError,
    BillingProviderError,
    BillingAccountNotFoundError,
)


def _error_response(error):
    if isinstance(error, BillingDisabledError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif isinstance(error, BillingAccountNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    else:
        code = status.HTTP_502_BAD_GATEWAY
    return Response({'error': str(error)}, status=code)


@extend_schema(
    request=None,
    responses={200: SessionUrlSerializer, 502: ErrorResponseSerializer, 503: ErrorResponseSerializer},
    description="Start a subscription checkout. Signed-in users without access may call it.",
    tags=['billing'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def checkout(request):
    try:
        url = start_checkout(user=request.user)
    except (BillingDisabledError, BillingProviderError) as e:
        return _error_response(e)
    return Response({'url': url})


@extend_schema(
    request=None,
    responses={
        200: SessionUrlSerializer,
        404: ErrorResponseSerializer,
        502: ErrorResponseSerializer,
        503: ErrorResponseSerializer,
    },
    description="Open the customer portal to manage the subscription.",
    tags=['billing'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def portal(request):
    try:
        url = open_billing_portal(user=request.user)
    except (BillingDisabledError, BillingAccountNotFoundError, BillingProviderError) as e:
        return _error_response(e)
    return Response({'url': url})
