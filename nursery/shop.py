# HTTP route'ları ve MCP tool'ları aynı payload'ları döner
import logging

from .cart import CartStore, build_cart_summary
from .catalog import ALL_CATEGORIES, CATALOG, CATEGORIES, filter_catalog, find_product, product_to_dict
from .checkout import CheckoutService

logger = logging.getLogger(__name__)


def search_products(query: str = "", category: str = ALL_CATEGORIES) -> dict:
    results = filter_catalog(CATALOG, query, category)
    return {
        "products": [product_to_dict(p) for p in results],
        "count": len(results),
        "message": f"{len(results)} plant(s) found",
    }


def list_categories() -> dict:
    return {"categories": list(CATEGORIES)}


def add_to_cart(store: CartStore, product_id: str) -> dict:
    product = find_product(product_id)
    if not product:
        logger.warning("add_to_cart: unknown product %s", product_id)
        return {"success": False, "message": "Product not found"}

    cart = store.add(product)
    return {
        "success": True,
        "message": f"{product.name} added to cart",
        "cart": build_cart_summary(cart),
    }


def increment_item(store: CartStore, product_id: str) -> dict:
    cart = store.increment(product_id)
    return {
        "success": True,
        "message": "Quantity increased" if product_id in cart else "Item is not in cart",
        "cart": build_cart_summary(cart),
    }


def decrement_item(store: CartStore, product_id: str) -> dict:
    present = product_id in store.snapshot()
    cart = store.decrement(product_id)
    if not present:
        message = "Item is not in cart"
    elif product_id in cart:
        message = "Quantity decreased"
    else:
        message = "Item removed from cart"
    return {"success": True, "message": message, "cart": build_cart_summary(cart)}


def remove_from_cart(store: CartStore, product_id: str) -> dict:
    present = product_id in store.snapshot()
    cart = store.remove(product_id)
    return {
        "success": True,
        "message": "Item removed from cart" if present else "Item is not in cart",
        "cart": build_cart_summary(cart),
    }


def get_cart(store: CartStore) -> dict:
    summary = build_cart_summary(store.snapshot())

    if summary["isEmpty"]:
        return {
            "isEmpty": True,
            "message": "Your cart is empty",
            "cart": summary,
        }

    return {
        "isEmpty": False,
        "message": f"You have {summary['label']} in your cart",
        "cart": summary,
    }


def checkout(store: CartStore, service: CheckoutService) -> dict:
    return service.acknowledge(store.snapshot()).to_dict()
