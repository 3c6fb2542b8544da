import pytest
from catalog_studio.core.router import DEFAULT_PAGE, ViewRouter, resolve_page
from catalog_studio.utils.typing import Category, Page

@pytest.mark.parametrize("signal,expected", [
    ("products", Page.PRODUCTS),
    ("#plugins", Page.PLUGINS),
    ("  #About ", Page.ABOUT),
    ("home", Page.HOME),
    ("", DEFAULT_PAGE),
    ("#", DEFAULT_PAGE),
    ("sponsor", DEFAULT_PAGE),
    ("products/../../etc", DEFAULT_PAGE),
    (None, DEFAULT_PAGE),
    (42, DEFAULT_PAGE),
    (["products"], DEFAULT_PAGE),
])
def test_resolve_page(signal, expected):
    assert resolve_page(signal) == expected

def test_active_category_only_for_catalog_pages():
    router = ViewRouter()
    assert router.active_category is None
    router.navigate("products")
    assert router.active_category is Category.PRODUCTS
    router.navigate("plugins")
    assert router.active_category is Category.PLUGINS
    router.navigate("about")
    assert router.active_category is None

def test_listeners_fire_only_on_change():
    router = ViewRouter()
    seen = []
    router.subscribe(lambda prev, page: seen.append((prev, page)))

    assert router.navigate("#products") is True
    assert router.navigate("products") is False
    assert router.navigate("garbage") is True  # falls back to home
    assert seen == [(Page.HOME, Page.PRODUCTS), (Page.PRODUCTS, Page.HOME)]

def test_unsubscribe():
    router = ViewRouter()
    seen = []
    listener = lambda prev, page: seen.append(page)
    router.subscribe(listener)
    router.subscribe(listener)
    router.navigate("plugins")
    router.unsubscribe(listener)
    router.navigate("products")
    assert seen == [Page.PLUGINS]
