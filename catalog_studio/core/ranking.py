"""
Incremental search ranking over catalog items.

Pure functions only: safe to call on every keystroke.
"""
from __future__ import annotations
from typing import List, Optional, Sequence

from catalog_studio.utils.typing import Category, Item

EXACT_NAME = 100
NAME_PREFIX = 50
NAME_CONTAINS = 30
DESCRIPTION_CONTAINS = 20
IDENTIFIER_CONTAINS = 10

def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().lower()

def _contains(field: Optional[str], term: str) -> bool:
    return bool(field) and term in field.lower()

def _identifier_matches(item: Item, term: str) -> bool:
    return _contains(item.code, term) or _contains(item.id, term)

def _inclusion_identifier_matches(item: Item, term: str, category: Optional[Category]) -> bool:
    # products are found by code, plugins by id; the score bonus looks at both
    if category is Category.PRODUCTS:
        return _contains(item.code, term)
    if category is Category.PLUGINS:
        return _contains(item.id, term)
    return _identifier_matches(item, term)

def matches(item: Item, term: str, category: Optional[Category] = None) -> bool:
    """Inclusion predicate for an already-normalized search term.

    Without a category either identifier counts.
    """
    return (
        term in item.name.lower()
        or _contains(item.description, term)
        or _inclusion_identifier_matches(item, term, category)
    )

def score(item: Item, term: str) -> int:
    name = item.name.lower()
    total = 0
    if name == term:
        total += EXACT_NAME
    elif name.startswith(term):
        total += NAME_PREFIX
    elif term in name:
        total += NAME_CONTAINS

    if _contains(item.description, term):
        total += DESCRIPTION_CONTAINS
    if _identifier_matches(item, term):
        total += IDENTIFIER_CONTAINS
    return total

def rank(
    items: Sequence[Item],
    query: Optional[str],
    category: Optional[Category] = None,
) -> List[Item]:
    """
    Filter and order items for a search query.

    An empty query returns the items in fetch order. Otherwise matching items
    are sorted by descending score; sorted() is stable so equal scores keep
    their fetch order.
    """
    term = normalize_query(query)
    if not term:
        return list(items)
    included = [item for item in items if matches(item, term, category)]
    return sorted(included, key=lambda item: -score(item, term))
