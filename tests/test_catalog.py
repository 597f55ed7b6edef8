from decimal import Decimal

from nursery.catalog import (
    CATALOG,
    CATEGORIES,
    Product,
    filter_catalog,
    find_product,
    product_to_dict,
)


def names(products):
    return [p.name for p in products]


def test_empty_query_all_categories_returns_full_catalog_in_order():
    assert filter_catalog(CATALOG, "", "All") == list(CATALOG)


def test_query_is_case_insensitive():
    result = filter_catalog(CATALOG, "MON", "All")
    assert names(result) == ["Monstera Deliciosa"]


def test_category_filter_is_exact():
    result = filter_catalog(CATALOG, "", "Succulent")
    assert names(result) == ["Aloe Vera", "Jade Plant"]
    assert all(p.category == "Succulent" for p in result)


def test_query_and_category_combine():
    assert names(filter_catalog(CATALOG, "plant", "Low Light")) == ["Snake Plant", "ZZ Plant"]
    assert names(filter_catalog(CATALOG, "plant", "Succulent")) == ["Jade Plant"]


def test_unknown_category_yields_nothing():
    assert filter_catalog(CATALOG, "", "Cactus") == []
    assert filter_catalog(CATALOG, "", "all") == []


def test_query_whitespace_is_not_trimmed():
    assert filter_catalog(CATALOG, " lily", "All") == [find_product("p3")]
    assert filter_catalog(CATALOG, "lily ", "All") == []
    assert filter_catalog(CATALOG, "snakeplant", "All") == []


def test_filter_works_on_any_catalog():
    custom = [
        Product("x1", "Ficus", Decimal("9.99"), "Tropical", "placeholder:Ficus"),
        Product("x2", "Fern", Decimal("7.00"), "Shade", "placeholder:Fern"),
    ]
    assert names(filter_catalog(custom, "f", "All")) == ["Ficus", "Fern"]
    assert filter_catalog(custom, "", "Shade") == [custom[1]]
    assert filter_catalog([], "anything", "All") == []


def test_only_letter_case_is_folded():
    custom = [
        Product("x1", "Café Palm", Decimal("11.00"), "Tropical", "placeholder:Cafe"),
        Product("x2", "ÉLODÉE", Decimal("5.50"), "Aquatic", "placeholder:Elodee"),
    ]
    assert filter_catalog(custom, "cafe", "All") == []
    assert filter_catalog(custom, "CAFÉ", "All") == [custom[0]]
    assert filter_catalog(custom, "élodée", "All") == [custom[1]]
    assert filter_catalog(custom, "elodee", "All") == []


def test_categories_start_with_all_in_first_seen_order():
    assert CATEGORIES == ["All", "Tropical", "Low Light", "Blooming", "Succulent"]


def test_find_product():
    assert find_product("p2").name == "Snake Plant"
    assert find_product("nope") is None


def test_product_to_dict():
    data = product_to_dict(find_product("p1"))
    assert data == {
        "id": "p1",
        "name": "Monstera Deliciosa",
        "price": 24.99,
        "category": "Tropical",
        "imageRef": "placeholder:Monstera",
    }
