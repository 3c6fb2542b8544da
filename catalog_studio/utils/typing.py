from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

class Category(str, Enum):
    """Catalog-bearing navigation targets."""
    PRODUCTS = "products"
    PLUGINS = "plugins"

class Page(str, Enum):
    HOME = "home"
    PRODUCTS = "products"
    PLUGINS = "plugins"
    ABOUT = "about"

    @property
    def category(self) -> Optional[Category]:
        try:
            return Category(self.value)
        except ValueError:
            return None

class LicenseType(str, Enum):
    PERPETUAL = "PERPETUAL"
    SUBSCRIPTION = "SUBSCRIPTION"

@dataclass(frozen=True)
class Item:
    name: str
    id: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    icon_ref: Optional[str] = None

    @property
    def key(self) -> str:
        return self.id or self.code or self.name

    @classmethod
    def from_record(cls, category: Category, record: Dict[str, Any]) -> "Item":
        """Build an item from a catalog JSON record.

        Products carry ``productCode`` and ``iconClass``; plugins carry a
        numeric or string ``id``, ``productCode`` and an ``icon`` URL.
        """
        raw_id = record.get("id")
        icon = record.get("iconClass") if category is Category.PRODUCTS else record.get("icon")
        return cls(
            name=str(record.get("name") or ""),
            id=None if raw_id in (None, "") else str(raw_id),
            code=record.get("productCode") or None,
            description=record.get("description") or None,
            icon_ref=icon or None,
        )

def default_expiry(today: Optional[date] = None) -> str:
    """Today plus one year, as ``YYYY-MM-DD``."""
    today = today or date.today()
    try:
        return today.replace(year=today.year + 1).isoformat()
    except ValueError:  # Feb 29
        return today.replace(year=today.year + 1, day=28).isoformat()

@dataclass
class GenerationParameters:
    expiry_date: str = field(default_factory=default_expiry)
    license_type: LicenseType = LicenseType.PERPETUAL
    user_count: int = 1

@dataclass(frozen=True)
class Preferences:
    licensee_name: str = ""
    assignee_name: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.licensee_name and self.assignee_name)

@dataclass
class Notification:
    message: str
    kind: str  # "success" | "error"
    seq: int = 0

@dataclass
class AppState:
    """Everything the presentation layer renders, owned by the controller."""
    page: Page = Page.HOME
    query: str = ""
    ranked: List[Item] = field(default_factory=list)
    loading: bool = False
    needs_configuration: bool = False
    view_token: int = 0
