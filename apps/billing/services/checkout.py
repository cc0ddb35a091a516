"""
Subscription checkout and customer portal (Stripe).

Both flows only create a hosted session and hand its URL back to the
client; payment details never pass through this service.
"""

import logging

import stripe
from django.conf import settings

from apps.accounts.models import Company

from .exceptions import BillingDisabledError, BillingProviderError, BillingAccountNotFoundError

logger = logging.getLogger(__name__)


def _configure():
    if not settings.BILLING_ENABLED or not settings.STRIPE_SECRET_KEY:
        raise BillingDisabledError("Billing is not available")
    stripe.api_key = settings.STRIPE_SECRET_KEY


def _billing_company(user):
    # Lapsed companies are inactive but still need to pay
    return Company.objects.filter(email__iexact=user.email).first()


def start_checkout(*, user) -> str:
    """
    Create a subscription Checkout session for ``user``.

    Returns:
        URL of the hosted checkout page

    Raises:
        BillingDisabledError: If billing is switched off
        BillingProviderError: If Stripe fails
    """
    _configure()
    if not settings.STRIPE_PRICE_ID:
        raise BillingDisabledError("No subscription price is configured")

    params = {
        'mode': 'subscription',
        'line_items': [{'price': settings.STRIPE_PRICE_ID, 'quantity': 1}],
        'success_url': settings.BILLING_SUCCESS_URL,
        'cancel_url': settings.BILLING_CANCEL_URL,
        'client_reference_id': str(user.id),
    }
    company = _billing_company(user)
    if company and company.stripe_customer_id:
        params['customer'] = company.stripe_customer_id
    else:
        params['customer_email'] = user.email

    try:
        session = stripe.checkout.Session.create(**params)
    except stripe.StripeError as e:
        logger.error("Checkout session failed for user %s: %s", user.id, e)
        raise BillingProviderError("Could not start checkout") from e

    logger.info("Checkout session %s created for user %s", session.id, user.id)
    return session.url


def open_billing_portal(*, user) -> str:
    """
    Create a customer-portal session for the user's company.

    Raises:
        BillingDisabledError: If billing is switched off
        BillingAccountNotFoundError: If the company has no Stripe customer yet
        BillingProviderError: If Stripe fails
    """
    _configure()

    company = _billing_company(user)
    if company is None or not company.stripe_customer_id:
        raise BillingAccountNotFoundError("No subscription found for this account")

    try:
        session = stripe.billing_portal.Session.create(
            customer=company.stripe_customer_id,
            return_url=settings.BILLING_RETURN_URL,
        )
    except stripe.StripeError as e:
        logger.error("Billing portal failed for company %s: %s", company.id, e)
        raise BillingProviderError("Could not open the billing portal") from e

    return session.url
