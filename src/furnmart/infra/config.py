"""Storefront configuration.

Defaults reproduce the prototype storefront; the environment can override the
promo table, the paging constants and the catalog page path.
"""

from __future__ import annotations

import json
import os
from typing import Any

from furnmart.domain.cart import PromoTable
from furnmart.domain.catalog import DEFAULT_CATALOG_PATH, DEFAULT_MAX_PAGES, FilterTaxonomy
from furnmart.domain.errors import ConfigurationError

DEFAULT_PROMO_CODES: dict[str, dict[str, Any]] = {
    "SAVE10": {"type": "percentage", "value": 10},
    "SAVE100": {"type": "fixed", "value": 100},
    "WELCOME": {"type": "percentage", "value": 15},
    "FURNMART2025": {"type": "fixed", "value": 200},
}

DEFAULT_FILTER_GROUPS: dict[str, tuple[str, ...]] = {
    "category": ("sofas", "chairs", "tables", "beds", "storage", "desks", "decor"),
    "price": ("under-1000", "1000-5000", "5000-10000", "over-10000"),
    "room": ("living-room", "bedroom", "dining-room", "office", "outdoor"),
    "features": ("in-stock", "on-sale", "free-delivery", "ar-view", "eco-friendly"),
}

DEFAULT_SORT_KEYS: tuple[str, ...] = (
    "featured",
    "price-low",
    "price-high",
    "newest",
    "rating",
)

DEFAULT_RESULT_BASE_COUNT = 165


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")
    if value < 1:
        raise ConfigurationError(f"{name} must be >= 1")
    return value


def promo_table() -> PromoTable:
    raw = os.getenv("FURNMART_PROMO_CODES")
    if not raw:
        return PromoTable.from_config(DEFAULT_PROMO_CODES)

    try:
        config = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError("FURNMART_PROMO_CODES must be valid JSON") from exc
    if not isinstance(config, dict):
        raise ConfigurationError("FURNMART_PROMO_CODES must be a JSON object")
    return PromoTable.from_config(config)


def filter_taxonomy() -> FilterTaxonomy:
    return FilterTaxonomy.from_config(DEFAULT_FILTER_GROUPS, DEFAULT_SORT_KEYS)


def max_pages() -> int:
    return _int_from_env("FURNMART_MAX_PAGES", DEFAULT_MAX_PAGES)


def result_base_count() -> int:
    return _int_from_env("FURNMART_RESULT_BASE_COUNT", DEFAULT_RESULT_BASE_COUNT)


def catalog_path() -> str:
    """Storefront page the catalog URL points at; reset URLs are this bare path."""
    path = os.getenv("FURNMART_CATALOG_PATH", "").strip() or DEFAULT_CATALOG_PATH
    if not path.startswith("/"):
        raise ConfigurationError(f"FURNMART_CATALOG_PATH must start with '/', got {path!r}")
    return path
