import logging
from typing import Optional

from fastapi import FastAPI
from mcp.server.fastmcp import FastMCP

from nursery.cart import CartStore
from nursery.checkout import CheckoutService, DemoCheckout
from nursery.config import BASE_URL, LOG_LEVEL, PORT, STORE_NAME
from nursery.mcp_handlers import register_mcp
from nursery.routes import register_api_routes

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(store: Optional[CartStore] = None, checkout: Optional[CheckoutService] = None) -> FastAPI:
    # =====================================================
    # 1) FastAPI app + sahipli state
    # =====================================================
    app = FastAPI(title=STORE_NAME)
    app.state.cart_store = store or CartStore()
    app.state.checkout = checkout or DemoCheckout()

    # =====================================================
    # 2) MCP Server
    # =====================================================
    mcp = FastMCP(
        name="nursery-mcp",
        mount_path="/mcp",
        sse_path="/sse",
        message_path="/messages/",
    )
    register_mcp(mcp, app.state.cart_store, app.state.checkout)
    app.state.mcp = mcp

    @app.get("/mcp")
    async def mcp_info_handler():
        """MCP server info"""
        return {
            "name": "nursery-mcp",
            "version": "1.0.0",
            "protocols": ["sse"],
            "endpoints": {
                "sse": f"{BASE_URL}/mcp/sse",
                "messages": f"{BASE_URL}/mcp/messages/",
            },
        }

    # =====================================================
    # 3) Normal API routes
    # =====================================================
    register_api_routes(app)

    # =====================================================
    # 4) Debug route
    # =====================================================
    @app.get("/__routes__")
    async def debug_routes():
        return [{"path": route.path, "methods": sorted(route.methods) if hasattr(route, 'methods') else None} for route in app.router.routes]

    # /mcp altındaki SSE transport; route'lardan sonra mount edilir
    app.mount("/mcp", mcp.sse_app())

    logger.info("%s ready (%s)", STORE_NAME, BASE_URL)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
