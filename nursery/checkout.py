import logging
import uuid
from dataclasses import dataclass
from typing import Optional, Protocol

from .cart import Cart, cart_count, format_price, subtotal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutAcknowledgment:
    accepted: bool
    message: str
    order_id: Optional[str] = None
    item_count: int = 0
    total_formatted: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "success": self.accepted,
            "message": self.message,
            "order": None if not self.accepted else {
                "orderId": self.order_id,
                "itemCount": self.item_count,
                "total": self.total_formatted,
            },
        }


class CheckoutService(Protocol):
    def acknowledge(self, cart: Cart) -> CheckoutAcknowledgment:
        ...


class DemoCheckout:
    """
    Gerçek ödeme yok: sepet snapshot'ını alır, sadece onay döner.
    Sepet temizlenmez; ödeme/stok düşümü bu servisin işi değil.
    """

    def acknowledge(self, cart: Cart) -> CheckoutAcknowledgment:
        count = cart_count(cart)
        if count == 0:
            return CheckoutAcknowledgment(
                accepted=False,
                message="Your cart is empty. Add some leafy friends!",
            )

        order_id = f"ORD-{uuid.uuid4().hex[:8].upper()}"
        total = format_price(subtotal(cart))
        logger.info("checkout acknowledged %s: %d item(s), total %s", order_id, count, total)

        return CheckoutAcknowledgment(
            accepted=True,
            message="Thank you! (This is a demo checkout; no payment was taken.)",
            order_id=order_id,
            item_count=count,
            total_formatted=total,
        )
