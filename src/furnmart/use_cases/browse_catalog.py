"""Browse catalog use case."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from furnmart.domain.catalog import DEFAULT_CATALOG_PATH, CatalogQuery, FilterTaxonomy
from furnmart.domain.catalog_engine import CatalogQueryEngine
from furnmart.domain.outcome import Outcome
from furnmart.ports.result_counter import ResultCounter


@dataclass(frozen=True, slots=True)
class CatalogResult:
    query: CatalogQuery
    result_count: int
    max_pages: int
    query_string: str
    url: str
    outcome: Outcome


class BrowseCatalog:
    """
    Catalog query updates driven by the current page URL.

    The URL is the only state: every call decodes the caller's query string,
    applies one engine operation, and returns the new canonical query string
    together with the URL (storefront path plus query string) for the caller
    to put back in the address bar. At defaults the URL is the bare path.

    Raises (from the engine, for controls that cannot come from the taxonomy):
        FilterValidationError, SortValidationError, ViewModeValidationError
    """

    def __init__(
        self,
        taxonomy: FilterTaxonomy,
        result_counter: ResultCounter,
        max_pages: int,
        path: str = DEFAULT_CATALOG_PATH,
    ) -> None:
        self._taxonomy = taxonomy
        self._result_counter = result_counter
        self._max_pages = max_pages
        self._path = path

    def open(self, query_string: str) -> CatalogQueryEngine:
        return CatalogQueryEngine.from_url(
            query_string,
            taxonomy=self._taxonomy,
            result_counter=self._result_counter,
            max_pages=self._max_pages,
            path=self._path,
        )

    def view(self, query_string: str) -> CatalogResult:
        return self._run(query_string, lambda engine: Outcome.unchanged())

    def toggle_filter(self, query_string: str, group: str, value: str) -> CatalogResult:
        return self._run(query_string, lambda engine: engine.toggle_filter(group, value))

    def clear_all_filters(self, query_string: str) -> CatalogResult:
        return self._run(query_string, lambda engine: engine.clear_all_filters())

    def set_sort(self, query_string: str, key: str) -> CatalogResult:
        return self._run(query_string, lambda engine: engine.set_sort(key))

    def set_view_mode(self, query_string: str, mode: str) -> CatalogResult:
        return self._run(query_string, lambda engine: engine.set_view_mode(mode))

    def go_to_page(self, query_string: str, page: Any) -> CatalogResult:
        return self._run(query_string, lambda engine: engine.go_to_page(page))

    def next_page(self, query_string: str) -> CatalogResult:
        return self._run(query_string, lambda engine: engine.next_page())

    def previous_page(self, query_string: str) -> CatalogResult:
        return self._run(query_string, lambda engine: engine.previous_page())

    def _run(
        self,
        query_string: str,
        update: Callable[[CatalogQueryEngine], Outcome],
    ) -> CatalogResult:
        engine = self.open(query_string)
        outcome = update(engine)
        return CatalogResult(
            query=engine.query,
            result_count=engine.result_count(),
            max_pages=engine.max_pages,
            query_string=engine.serialize(),
            url=engine.to_url(),
            outcome=outcome,
        )
