from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import urljoin

from catalog_studio.utils.io import read_yaml
from catalog_studio.utils.logging import logger
from catalog_studio.utils.typing import Category, Item

BUNDLED_TABLE = Path(__file__).resolve().parent.parent / "config" / "icons.yaml"
DEFAULT_ICON = "/images/plugin.svg"
ICON_PREFIX = "icon-"

@dataclass
class IconTable:
    default: str = DEFAULT_ICON
    products: Dict[str, str] = field(default_factory=dict)
    base_url: str = ""

    def _absolute(self, url: str) -> str:
        if self.base_url and url.startswith("/"):
            return urljoin(self.base_url.rstrip("/") + "/", url.lstrip("/"))
        return url

    def product_icon(self, icon_ref: Optional[str]) -> str:
        if icon_ref and icon_ref.startswith(ICON_PREFIX):
            key = icon_ref[len(ICON_PREFIX):]
            return self._absolute(self.products.get(key, self.default))
        return self._absolute(self.default)

    def plugin_icon(self, icon_ref: Optional[str]) -> str:
        return self._absolute(icon_ref or self.default)

    def icon_for(self, category: Category, item: Item) -> str:
        if category is Category.PRODUCTS:
            return self.product_icon(item.icon_ref)
        return self.plugin_icon(item.icon_ref)

def load_icon_table(path: Optional[Path] = None, base_url: str = "") -> IconTable:
    path = path or BUNDLED_TABLE
    data = read_yaml(path, default={})
    if not isinstance(data, dict):
        logger.warning("icons: ignoring malformed table %s", path)
        data = {}
    products = data.get("products") or {}
    return IconTable(
        default=str(data.get("default") or DEFAULT_ICON),
        products={str(k): str(v) for k, v in products.items()},
        base_url=base_url,
    )
