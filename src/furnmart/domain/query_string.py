"""URL query-string codec for catalog queries.

Format (parameters in this order, each present only when it differs from the
default):

    <group>=<v1>,<v2>   one per non-empty filter group, taxonomy order
    sort=<key>          when not "featured"
    page=<n>            when greater than 1
    view=list           when not the grid view

Commas are kept literal as value separators; everything else is
percent-encoded, with spaces as "+" like the browser's URLSearchParams.
Decoding is lenient since users edit URLs by hand: unknown groups, options,
sort keys and view modes fall back to defaults, and the page is clamped.
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qsl, urlencode

from furnmart.domain.catalog import (
    DEFAULT_MAX_PAGES,
    DEFAULT_SORT,
    ITEMS_PER_PAGE,
    CatalogQuery,
    FilterTaxonomy,
    ViewMode,
)
from furnmart.domain.coercion import parse_page

logger = logging.getLogger(__name__)

SORT_PARAM = "sort"
PAGE_PARAM = "page"
VIEW_PARAM = "view"
VALUE_SEPARATOR = ","


def encode_catalog_query(query: CatalogQuery, taxonomy: FilterTaxonomy) -> str:
    """Encode query as a query string without the leading '?'."""
    params: list[tuple[str, str]] = []

    for group in taxonomy.groups:
        values = taxonomy.canonical(group, query.selected(group))
        if values:
            params.append((group, VALUE_SEPARATOR.join(values)))

    if query.sort_by != DEFAULT_SORT:
        params.append((SORT_PARAM, query.sort_by))

    if query.current_page > 1:
        params.append((PAGE_PARAM, str(query.current_page)))

    if query.view_mode is not ViewMode.GRID:
        params.append((VIEW_PARAM, query.view_mode.value))

    return urlencode(params, safe=VALUE_SEPARATOR)


def decode_catalog_query(
    query_string: str,
    taxonomy: FilterTaxonomy,
    max_pages: int = DEFAULT_MAX_PAGES,
    items_per_page: int = ITEMS_PER_PAGE,
) -> CatalogQuery:
    """Decode a query string (with or without the leading '?') into a CatalogQuery."""
    params: dict[str, str] = {}
    # First occurrence wins, as URLSearchParams.get() does
    for key, value in parse_qsl(query_string.lstrip("?")):
        params.setdefault(key, value)

    filters: dict[str, tuple[str, ...]] = {}
    for group in taxonomy.groups:
        raw = [v for v in params.get(group, "").split(VALUE_SEPARATOR) if v]
        filters[group] = taxonomy.canonical(group, raw)
        ignored = set(raw) - set(filters[group])
        if ignored:
            logger.debug(
                "Ignoring unknown filter options",
                extra={"group": group, "options": sorted(ignored)},
            )

    sort_by = params.get(SORT_PARAM, DEFAULT_SORT)
    if sort_by not in taxonomy.sort_keys:
        logger.debug("Ignoring unknown sort key", extra={"sort_by": sort_by})
        sort_by = DEFAULT_SORT

    current_page = 1
    if PAGE_PARAM in params:
        current_page = parse_page(params[PAGE_PARAM], max_pages).value

    try:
        view_mode = ViewMode(params.get(VIEW_PARAM, ViewMode.GRID.value))
    except ValueError:
        logger.debug("Ignoring unknown view mode", extra={"view_mode": params[VIEW_PARAM]})
        view_mode = ViewMode.GRID

    return CatalogQuery(
        filters=filters,
        sort_by=sort_by,
        view_mode=view_mode,
        current_page=current_page,
        items_per_page=items_per_page,
    )
