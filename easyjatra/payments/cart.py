"""
Logique panier pure (pas de Stripe, pas de DB).
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

# module easyjatra.payments.cart
def to_unit_amount(price: Any) -> int:
    """
    Convertit un prix unitaire décimal en plus petite unité monétaire (centimes).
    - Passe par str() pour éviter la dérive des flottants (19.95 -> 1995).
    - Arrondi au centime le plus proche (ROUND_HALF_UP).
    """
    amount = Decimal(str(price)) * 100
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def from_unit_amount(amount: int) -> float:
    """Centimes -> prix décimal (amount_total Stripe vers prix de commande)."""
    return float(Decimal(int(amount)) / 100)

def to_line_items(checkout: Dict[str, Any], currency: str) -> List[Dict[str, Any]]:
    """
    Construit l'unique line_item Stripe d'un achat de ticket.
    - price_data.unit_amount en centimes, product_data avec nom, image et description.
    """
    product_data: Dict[str, Any] = {"name": checkout.get("name") or "Ticket"}
    if checkout.get("image"):
        product_data["images"] = [checkout["image"]]
    if checkout.get("description"):
        product_data["description"] = checkout["description"]
    return [{
        "price_data": {
            "currency": currency,
            "product_data": product_data,
            "unit_amount": to_unit_amount(checkout.get("price") or 0),
        },
        "quantity": int(checkout.get("quantity") or 1),
    }]

def make_metadata(ticket_id: str, customer_email: str) -> Dict[str, str]:
    """
    Métadonnées Stripe de la session: permettent de retrouver le ticket et l'acheteur
    à la confirmation sans lecture supplémentaire.
    """
    return {"ticketId": str(ticket_id), "customer": customer_email or ""}
