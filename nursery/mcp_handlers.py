from mcp.server.fastmcp import FastMCP

from . import shop
from .cart import CartStore
from .catalog import ALL_CATEGORIES
from .checkout import CheckoutService


def register_mcp(mcp: FastMCP, store: CartStore, checkout_service: CheckoutService):
    """MCP tool registration"""

    @mcp.tool()
    async def search_products(query: str = "", category: str = ALL_CATEGORIES) -> dict:
        """Search the plant catalog by name and category"""
        return shop.search_products(query, category)

    @mcp.tool()
    async def list_categories() -> dict:
        """List plant categories"""
        return shop.list_categories()

    @mcp.tool()
    async def add_to_cart(productId: str) -> dict:
        """Add a plant to the cart"""
        return shop.add_to_cart(store, productId)

    @mcp.tool()
    async def increment_item(productId: str) -> dict:
        """Increase a cart line's quantity"""
        return shop.increment_item(store, productId)

    @mcp.tool()
    async def decrement_item(productId: str) -> dict:
        """Decrease a cart line's quantity"""
        return shop.decrement_item(store, productId)

    @mcp.tool()
    async def remove_from_cart(productId: str) -> dict:
        """Remove a plant from the cart"""
        return shop.remove_from_cart(store, productId)

    @mcp.tool()
    async def get_cart() -> dict:
        """Show the cart"""
        return shop.get_cart(store)

    @mcp.tool()
    async def checkout() -> dict:
        """Send the cart to checkout (demo acknowledgment only)"""
        return shop.checkout(store, checkout_service)
