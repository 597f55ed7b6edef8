from fastapi import APIRouter, FastAPI, HTTPException, Query, Request

from . import shop
from .catalog import ALL_CATEGORIES, find_product, product_to_dict


def register_api_routes(app: FastAPI):

    # ---------------------------------------------------
    # MAĞAZA API ROUTELARI
    # ---------------------------------------------------
    router = APIRouter(prefix="/api", tags=["nursery"])

    # 1) Ürün arama / filtreleme
    @router.get("/products")
    async def search_products_endpoint(
        query: str = Query("", description="Search text"),
        category: str = Query(ALL_CATEGORIES, description="Category or 'All'"),
    ):
        return shop.search_products(query, category)

    @router.get("/products/{productId}")
    async def get_product_endpoint(productId: str):
        product = find_product(productId)
        if not product:
            raise HTTPException(status_code=404, detail="Product not found")
        return product_to_dict(product)

    @router.get("/categories")
    async def categories_endpoint():
        return shop.list_categories()

    # 2) Sepet mutasyonları
    @router.post("/cart/add")
    async def add_to_cart_endpoint(productId: str, request: Request):
        return shop.add_to_cart(request.app.state.cart_store, productId)

    @router.post("/cart/increment")
    async def increment_endpoint(productId: str, request: Request):
        return shop.increment_item(request.app.state.cart_store, productId)

    @router.post("/cart/decrement")
    async def decrement_endpoint(productId: str, request: Request):
        return shop.decrement_item(request.app.state.cart_store, productId)

    @router.post("/cart/remove")
    async def remove_from_cart_endpoint(productId: str, request: Request):
        return shop.remove_from_cart(request.app.state.cart_store, productId)

    # 3) Sepeti görüntüleme
    @router.get("/cart")
    async def get_cart_endpoint(request: Request):
        return shop.get_cart(request.app.state.cart_store)

    # 4) Checkout (sadece onay)
    @router.post("/checkout")
    async def checkout_endpoint(request: Request):
        return shop.checkout(request.app.state.cart_store, request.app.state.checkout)

    app.include_router(router)
