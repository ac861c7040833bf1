"""
Module 'payments' (feature-first): point d'entrée public.
Réunit logique panier, metadata Stripe et client Stripe.
Les cas d'usage (create_checkout, confirm_payment) restent dans payments.service.
"""

from .cart import to_unit_amount, from_unit_amount, to_line_items, make_metadata
from .metadata import extract_metadata_from_session
from .stripe_client import StripeGateway, create_gateway, get_gateway

__all__ = [
    # cart
    "to_unit_amount",
    "from_unit_amount",
    "to_line_items",
    "make_metadata",
    # metadata
    "extract_metadata_from_session",
    # stripe
    "StripeGateway",
    "create_gateway",
    "get_gateway",
]
