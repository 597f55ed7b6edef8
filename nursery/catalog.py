from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Sequence

ALL_CATEGORIES = "All"


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: Decimal
    category: str
    image_ref: str


def placeholder_image(label: str) -> str:
    """Opaque image handle; the view layer decides how to draw it."""
    return f"placeholder:{label}"


CATALOG = (
    Product("p1", "Monstera Deliciosa", Decimal("24.99"), "Tropical", placeholder_image("Monstera")),
    Product("p2", "Snake Plant", Decimal("14.50"), "Low Light", placeholder_image("Snake Plant")),
    Product("p3", "Peace Lily", Decimal("18.00"), "Blooming", placeholder_image("Peace Lily")),
    Product("p4", "ZZ Plant", Decimal("19.75"), "Low Light", placeholder_image("ZZ Plant")),
    Product("p5", "Fiddle Leaf Fig", Decimal("29.99"), "Tropical", placeholder_image("Fiddle Leaf Fig")),
    Product("p6", "Aloe Vera", Decimal("12.00"), "Succulent", placeholder_image("Aloe Vera")),
    Product("p7", "Jade Plant", Decimal("15.99"), "Succulent", placeholder_image("Jade Plant")),
    Product("p8", "Orchid Phalaenopsis", Decimal("22.50"), "Blooming", placeholder_image("Orchid")),
)


def categories_of(catalog: Sequence[Product]) -> List[str]:
    # "All" + ilk görülme sırasına göre benzersiz kategoriler
    seen = []
    for p in catalog:
        if p.category not in seen:
            seen.append(p.category)
    return [ALL_CATEGORIES] + seen


CATEGORIES = categories_of(CATALOG)


def filter_catalog(catalog: Sequence[Product], query: str, category: str) -> List[Product]:
    """
    Katalog sırasını koruyarak filtreler.

    - category "All" ise kategori filtresi uygulanmaz
    - query isimde büyük/küçük harf duyarsız alt dize olarak aranır (trim yok)
    - bilinmeyen kategori hata değil, boş liste döner
    """
    q = query.lower()
    return [
        p for p in catalog
        if (category == ALL_CATEGORIES or p.category == category) and q in p.name.lower()
    ]


def find_product(product_id: str, catalog: Sequence[Product] = CATALOG) -> Optional[Product]:
    return next((p for p in catalog if p.id == product_id), None)


def product_to_dict(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": float(product.price),
        "category": product.category,
        "imageRef": product.image_ref,
    }
