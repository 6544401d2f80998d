from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from furnmart.domain.catalog import (
    DEFAULT_CATALOG_PATH,
    DEFAULT_MAX_PAGES,
    ITEMS_PER_PAGE,
    CatalogQuery,
    FilterTaxonomy,
    FilterValidationError,
    OutOfRangePage,
    SortValidationError,
    ViewMode,
    ViewModeValidationError,
)
from furnmart.domain.coercion import parse_page
from furnmart.domain.errors import ConfigurationError
from furnmart.domain.outcome import Outcome
from furnmart.domain.query_string import decode_catalog_query, encode_catalog_query

if TYPE_CHECKING:
    from furnmart.ports.result_counter import ResultCounter

logger = logging.getLogger(__name__)


class CatalogQueryEngine:
    """
    Catalog filter/sort/view/page state with URL two-way binding.

    - Filter changes reset the page to 1 and recompute the result count
    - Sorting keeps the current page
    - View mode is presentational only
    - Page requests are clamped into [1, max_pages]

    ``replace_url`` is called with the new URL after every change, in place
    of the current history entry.
    """

    def __init__(
        self,
        taxonomy: FilterTaxonomy,
        result_counter: ResultCounter,
        max_pages: int = DEFAULT_MAX_PAGES,
        items_per_page: int = ITEMS_PER_PAGE,
        replace_url: Callable[[str], None] | None = None,
        path: str = DEFAULT_CATALOG_PATH,
    ) -> None:
        if max_pages < 1:
            raise ConfigurationError("max_pages must be >= 1")
        if items_per_page < 1:
            raise ConfigurationError("items_per_page must be >= 1")
        if not path.startswith("/"):
            raise ConfigurationError("path must start with '/'", path=path)

        self._taxonomy = taxonomy
        self._result_counter = result_counter
        self._max_pages = max_pages
        self._replace_url = replace_url
        self._path = path
        self._query = CatalogQuery(
            filters=taxonomy.empty_selection(),
            items_per_page=items_per_page,
        )
        self._result_count = self._result_counter.count(self._query)

    @classmethod
    def from_url(
        cls,
        query_string: str,
        taxonomy: FilterTaxonomy,
        result_counter: ResultCounter,
        **options: Any,
    ) -> CatalogQueryEngine:
        """Start from defaults, then overlay whatever the URL carries."""
        engine = cls(taxonomy=taxonomy, result_counter=result_counter, **options)
        engine.load(query_string)
        return engine

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def query(self) -> CatalogQuery:
        return self._query

    @property
    def taxonomy(self) -> FilterTaxonomy:
        return self._taxonomy

    @property
    def max_pages(self) -> int:
        return self._max_pages

    def result_count(self) -> int:
        return self._result_count

    def serialize(self) -> str:
        return encode_catalog_query(self._query, self._taxonomy)

    def deserialize(self, query_string: str) -> CatalogQuery:
        return decode_catalog_query(
            query_string,
            self._taxonomy,
            max_pages=self._max_pages,
            items_per_page=self._query.items_per_page,
        )

    def to_url(self, path: str | None = None) -> str:
        """URL for the current state; the bare path when nothing differs from defaults."""
        query_string = self.serialize()
        base = self._path if path is None else path
        return f"{base}?{query_string}" if query_string else base

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def load(self, query_string: str) -> Outcome:
        """Replace the whole state with the one carried by query_string."""
        return self._commit(self.deserialize(query_string), recount=True)

    def toggle_filter(self, group: str, value: str) -> Outcome:
        """
        Select value in group if absent, deselect it if present.

        Raises:
            FilterValidationError: If group or value is not in the taxonomy
        """
        if group not in self._taxonomy.groups:
            raise FilterValidationError(f"unknown filter group {group!r}", group=group)
        if value not in self._taxonomy.groups[group]:
            raise FilterValidationError(
                f"unknown option {value!r} for filter group {group!r}",
                group=group,
                value=value,
            )

        current = self._query.selected(group)
        if value in current:
            updated = tuple(v for v in current if v != value)
        else:
            updated = self._taxonomy.canonical(group, (*current, value))

        filters = {**self._query.filters, group: updated}
        return self._commit(
            replace(self._query, filters=filters, current_page=1),
            recount=True,
        )

    def clear_all_filters(self) -> Outcome:
        return self._commit(
            replace(self._query, filters=self._taxonomy.empty_selection(), current_page=1),
            recount=True,
        )

    def set_sort(self, key: str) -> Outcome:
        """
        Change the sort key. The current page is kept.

        Raises:
            SortValidationError: If key is not offered
        """
        if key not in self._taxonomy.sort_keys:
            raise SortValidationError(f"unknown sort key {key!r}", sort_by=key)
        return self._commit(replace(self._query, sort_by=key))

    def set_view_mode(self, mode: str | ViewMode) -> Outcome:
        """
        Switch between grid and list.

        Raises:
            ViewModeValidationError: If mode is neither grid nor list
        """
        try:
            view_mode = ViewMode(mode)
        except ValueError:
            raise ViewModeValidationError(f"unknown view mode {mode!r}", view_mode=str(mode))
        return self._commit(replace(self._query, view_mode=view_mode))

    def go_to_page(self, page: Any) -> Outcome:
        parsed = parse_page(page, self._max_pages)
        corrections = (
            (OutOfRangePage(page, parsed.value, self._max_pages),) if parsed.adjusted else ()
        )
        outcome = self._commit(replace(self._query, current_page=parsed.value))
        return replace(outcome, corrections=corrections)

    def next_page(self) -> Outcome:
        """Advance one page; a no-op on the last page."""
        page = min(self._query.current_page + 1, self._max_pages)
        return self._commit(replace(self._query, current_page=page))

    def previous_page(self) -> Outcome:
        """Go back one page; a no-op on the first page."""
        page = max(self._query.current_page - 1, 1)
        return self._commit(replace(self._query, current_page=page))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _commit(self, query: CatalogQuery, recount: bool = False) -> Outcome:
        if recount:
            self._result_count = self._result_counter.count(query)

        if query == self._query:
            return Outcome.unchanged()

        self._query = query
        logger.debug(
            "Catalog query updated",
            extra={
                "filters": {group: list(values) for group, values in query.filters.items()},
                "sort_by": query.sort_by,
                "view_mode": query.view_mode.value,
                "current_page": query.current_page,
                "result_count": self._result_count,
            },
        )
        if self._replace_url is not None:
            self._replace_url(self.to_url())
        return Outcome()
