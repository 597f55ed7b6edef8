import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Iterator, Optional, Tuple

from .catalog import Product
from .config import CURRENCY_SYMBOL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    """Sepet satırı; ürün bilgisi ilk eklemede kopyalanır (katalog değişse de sabit kalır)."""
    product_id: str
    name: str
    price: Decimal
    image_ref: str
    quantity: int

    def __post_init__(self):
        # 0 adetli satır olmaz; azaltma satırı siler
        if self.quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {self.quantity} for {self.product_id}")

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class Cart:
    """
    Değişmez sepet snapshot'ı.

    Her product_id için en fazla bir satır tutulur; satırlar ilk eklenme
    sırasını korur. Mutasyonlar yeni bir Cart döner, mevcut olana dokunmaz.
    """
    lines: Tuple[CartLine, ...] = ()

    def __post_init__(self):
        ids = [line.product_id for line in self.lines]
        if len(ids) != len(set(ids)):
            raise ValueError(f"duplicate cart lines: {ids}")

    def get(self, product_id: str) -> Optional[CartLine]:
        return next((line for line in self.lines if line.product_id == product_id), None)

    def __contains__(self, product_id: object) -> bool:
        return any(line.product_id == product_id for line in self.lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def _with_line(self, new_line: CartLine) -> "Cart":
        return Cart(tuple(new_line if line.product_id == new_line.product_id else line for line in self.lines))

    def _without(self, product_id: str) -> "Cart":
        return Cart(tuple(line for line in self.lines if line.product_id != product_id))


EMPTY_CART = Cart()


def add_item(cart: Cart, product: Product) -> Cart:
    current = cart.get(product.id)
    if current is None:
        logger.debug("add_item %s: new line", product.id)
        line = CartLine(
            product_id=product.id,
            name=product.name,
            price=product.price,
            image_ref=product.image_ref,
            quantity=1,
        )
        return Cart(cart.lines + (line,))

    logger.debug("add_item %s: quantity %d -> %d", product.id, current.quantity, current.quantity + 1)
    return cart._with_line(replace(current, quantity=current.quantity + 1))


def increment(cart: Cart, product_id: str) -> Cart:
    current = cart.get(product_id)
    if current is None:
        return cart
    return cart._with_line(replace(current, quantity=current.quantity + 1))


def decrement(cart: Cart, product_id: str) -> Cart:
    current = cart.get(product_id)
    if current is None:
        return cart

    next_qty = current.quantity - 1
    if next_qty <= 0:
        logger.debug("decrement %s: line removed", product_id)
        return cart._without(product_id)
    return cart._with_line(replace(current, quantity=next_qty))


def remove_item(cart: Cart, product_id: str) -> Cart:
    if product_id not in cart:
        return cart
    logger.debug("remove_item %s", product_id)
    return cart._without(product_id)


def cart_count(cart: Cart) -> int:
    return sum(line.quantity for line in cart)


def subtotal(cart: Cart) -> Decimal:
    return sum((line.line_total for line in cart), Decimal("0"))


def format_price(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def build_cart_summary(cart: Cart) -> dict:
    items = []
    for line in cart:
        items.append({
            "id": line.product_id,
            "name": line.name,
            "imageRef": line.image_ref,
            "quantity": line.quantity,
            "unitPrice": float(line.price),
            "unitPriceFormatted": format_price(line.price),
            "lineTotal": float(line.line_total),
            "lineTotalFormatted": format_price(line.line_total),
        })

    total_qty = cart_count(cart)
    total_amount = subtotal(cart)

    return {
        "items": items,
        "totalQuantity": total_qty,
        "totalAmount": float(total_amount),
        "totalAmountFormatted": format_price(total_amount),
        "shipping": "Free",
        "isEmpty": total_qty == 0,
        "label": f"{total_qty} {'plant' if total_qty == 1 else 'plants'}",
    }


class CartStore:
    """
    Oturumun canlı sepetini sahiplenir.

    Her metot saf fonksiyonu uygular ve snapshot'ı tek atamada değiştirir;
    okuyucular yalnızca snapshot görür.
    """

    def __init__(self, cart: Cart = EMPTY_CART):
        self._cart = cart

    def snapshot(self) -> Cart:
        return self._cart

    def add(self, product: Product) -> Cart:
        self._cart = add_item(self._cart, product)
        return self._cart

    def increment(self, product_id: str) -> Cart:
        self._cart = increment(self._cart, product_id)
        return self._cart

    def decrement(self, product_id: str) -> Cart:
        self._cart = decrement(self._cart, product_id)
        return self._cart

    def remove(self, product_id: str) -> Cart:
        self._cart = remove_item(self._cart, product_id)
        return self._cart

    def reset(self) -> Cart:
        self._cart = EMPTY_CART
        return self._cart
