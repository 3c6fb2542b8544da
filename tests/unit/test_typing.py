from datetime import date
import pytest
from catalog_studio.utils.security import is_valid_date, sanitize_name
from catalog_studio.utils.typing import Category, Item, Page, default_expiry

def test_item_from_product_record():
    item = Item.from_record(Category.PRODUCTS, {
        "name": "GoLand", "productCode": "GO", "iconClass": "icon-go", "description": "",
    })
    assert item == Item(name="GoLand", code="GO", icon_ref="icon-go")
    assert item.key == "GO"

def test_item_from_plugin_record():
    item = Item.from_record(Category.PLUGINS, {"id": 10080, "name": "Rainbow", "icon": "/r.png"})
    assert item.id == "10080"
    assert item.code is None
    assert item.icon_ref == "/r.png"
    assert item.key == "10080"

def test_page_category():
    assert Page.PRODUCTS.category is Category.PRODUCTS
    assert Page.PLUGINS.category is Category.PLUGINS
    assert Page.HOME.category is None
    assert Page.ABOUT.category is None

@pytest.mark.parametrize("today,expected", [
    (date(2026, 10, 19), "2027-10-19"),
    (date(2024, 2, 29), "2025-02-28"),
    (date(2026, 12, 31), "2027-12-31"),
])
def test_default_expiry(today, expected):
    assert default_expiry(today) == expected

def test_validators():
    assert is_valid_date("2027-02-28")
    assert not is_valid_date("2027-02-30")
    assert not is_valid_date("27-02-28")
    assert sanitize_name("  Acme  ") == "Acme"
    assert sanitize_name(None) == ""
    assert len(sanitize_name("x" * 500)) == 200
