"""
Test suite for CatalogQueryEngine.

Covers:
- Filter toggling, page reset and result count refresh
- Sorting and view mode
- Page clamping and prev/next bounds
- URL binding (serialize, load, replace_url callback)
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from furnmart.adapters.heuristic_result_counter import HeuristicResultCounter
from furnmart.domain.catalog import (
    FilterTaxonomy,
    FilterValidationError,
    OutOfRangePage,
    SortValidationError,
    ViewMode,
    ViewModeValidationError,
)
from furnmart.domain.catalog_engine import CatalogQueryEngine
from furnmart.domain.errors import ConfigurationError
from furnmart.infra.config import DEFAULT_FILTER_GROUPS, DEFAULT_SORT_KEYS
from furnmart.ports.result_counter import ResultCounter


@pytest.fixture()
def taxonomy() -> FilterTaxonomy:
    return FilterTaxonomy.from_config(DEFAULT_FILTER_GROUPS, DEFAULT_SORT_KEYS)


@pytest.fixture()
def replace_url() -> Mock:
    return Mock()


@pytest.fixture()
def engine(taxonomy: FilterTaxonomy, replace_url: Mock) -> CatalogQueryEngine:
    return CatalogQueryEngine(
        taxonomy=taxonomy,
        result_counter=HeuristicResultCounter(),
        replace_url=replace_url,
        path="/products",
    )


# ==============================================================================
# Initial state
# ==============================================================================


def test_initial_state_is_defaults(engine: CatalogQueryEngine) -> None:
    query = engine.query

    assert query.sort_by == "featured"
    assert query.view_mode is ViewMode.GRID
    assert query.current_page == 1
    assert query.items_per_page == 12
    assert query.active_filter_count == 0
    assert set(query.filters) == {"category", "price", "room", "features"}
    assert engine.result_count() == 165
    assert engine.serialize() == ""
    assert engine.to_url() == "/products"


def test_invalid_paging_configuration_is_rejected(taxonomy: FilterTaxonomy) -> None:
    with pytest.raises(ConfigurationError):
        CatalogQueryEngine(taxonomy, HeuristicResultCounter(), max_pages=0)
    with pytest.raises(ConfigurationError):
        CatalogQueryEngine(taxonomy, HeuristicResultCounter(), items_per_page=0)


@pytest.mark.parametrize("path", ["", "products"])
def test_relative_path_is_rejected(taxonomy: FilterTaxonomy, path: str) -> None:
    with pytest.raises(ConfigurationError):
        CatalogQueryEngine(taxonomy, HeuristicResultCounter(), path=path)


def test_default_url_is_storefront_path(taxonomy: FilterTaxonomy) -> None:
    engine = CatalogQueryEngine(taxonomy, HeuristicResultCounter())

    assert engine.to_url() == "/products"


# ==============================================================================
# Filters
# ==============================================================================


def test_toggle_filter_selects_value(engine: CatalogQueryEngine) -> None:
    outcome = engine.toggle_filter("category", "chairs")

    assert outcome.ok
    assert outcome.changed
    assert engine.query.selected("category") == ("chairs",)
    assert engine.result_count() == 150


def test_toggle_filter_twice_restores_state(engine: CatalogQueryEngine) -> None:
    engine.toggle_filter("room", "office")
    before = engine.query

    engine.toggle_filter("category", "sofas")
    engine.toggle_filter("category", "sofas")

    assert engine.query == before


def test_selected_values_keep_option_order(engine: CatalogQueryEngine) -> None:
    engine.toggle_filter("category", "tables")
    engine.toggle_filter("category", "sofas")

    assert engine.query.selected("category") == ("sofas", "tables")


def test_toggle_filter_resets_page(engine: CatalogQueryEngine) -> None:
    engine.go_to_page(4)

    engine.toggle_filter("features", "on-sale")

    assert engine.query.current_page == 1


def test_scenario_url_after_two_filters(
    engine: CatalogQueryEngine, replace_url: Mock
) -> None:
    engine.toggle_filter("category", "chairs")
    engine.toggle_filter("price", "under-1000")

    assert engine.to_url() == "/products?category=chairs&price=under-1000"
    assert engine.result_count() == 135
    replace_url.assert_called_with("/products?category=chairs&price=under-1000")


def test_toggle_unknown_group_raises(engine: CatalogQueryEngine) -> None:
    with pytest.raises(FilterValidationError):
        engine.toggle_filter("colour", "red")


def test_toggle_unknown_value_raises(engine: CatalogQueryEngine) -> None:
    with pytest.raises(FilterValidationError):
        engine.toggle_filter("category", "lamps")


def test_clear_all_filters(engine: CatalogQueryEngine) -> None:
    engine.toggle_filter("category", "chairs")
    engine.toggle_filter("room", "bedroom")
    engine.set_sort("newest")
    engine.go_to_page(3)

    outcome = engine.clear_all_filters()

    assert outcome.changed
    assert engine.query.active_filter_count == 0
    assert engine.query.current_page == 1
    assert engine.query.sort_by == "newest"
    assert engine.result_count() == 165


def test_clear_all_filters_when_empty_is_unchanged(
    engine: CatalogQueryEngine, replace_url: Mock
) -> None:
    outcome = engine.clear_all_filters()

    assert outcome.ok
    assert not outcome.changed
    replace_url.assert_not_called()


def test_result_count_uses_counter_port(taxonomy: FilterTaxonomy) -> None:
    counter = Mock(spec=ResultCounter)
    counter.count.return_value = 42
    engine = CatalogQueryEngine(taxonomy, counter)

    engine.toggle_filter("category", "beds")

    assert engine.result_count() == 42
    assert counter.count.call_args.args[0].selected("category") == ("beds",)


# ==============================================================================
# Sort and view
# ==============================================================================


def test_set_sort_keeps_page(engine: CatalogQueryEngine) -> None:
    engine.go_to_page(3)

    outcome = engine.set_sort("price-low")

    assert outcome.changed
    assert engine.query.sort_by == "price-low"
    assert engine.query.current_page == 3


def test_set_unknown_sort_raises(engine: CatalogQueryEngine) -> None:
    with pytest.raises(SortValidationError):
        engine.set_sort("cheapest")


def test_set_view_mode(engine: CatalogQueryEngine) -> None:
    engine.toggle_filter("category", "desks")
    count = engine.result_count()

    outcome = engine.set_view_mode("list")

    assert outcome.changed
    assert engine.query.view_mode is ViewMode.LIST
    assert engine.result_count() == count
    assert engine.query.selected("category") == ("desks",)


def test_set_unknown_view_mode_raises(engine: CatalogQueryEngine) -> None:
    with pytest.raises(ViewModeValidationError):
        engine.set_view_mode("carousel")


# ==============================================================================
# Paging
# ==============================================================================


def test_go_to_page(engine: CatalogQueryEngine) -> None:
    outcome = engine.go_to_page(5)

    assert outcome.ok
    assert outcome.corrections == ()
    assert engine.query.current_page == 5


def test_go_to_page_past_the_end_clamps(engine: CatalogQueryEngine) -> None:
    outcome = engine.go_to_page(15)

    assert outcome.ok
    assert engine.query.current_page == 12
    assert len(outcome.corrections) == 1
    correction = outcome.corrections[0]
    assert isinstance(correction, OutOfRangePage)
    assert correction.error_code == "OUT_OF_RANGE_PAGE"
    assert correction.context == {"requested": "15", "applied": 12}


@pytest.mark.parametrize(("raw", "expected"), [(0, 1), (-3, 1), ("abc", 1), ("7", 7)])
def test_go_to_page_parses_input(engine: CatalogQueryEngine, raw: object, expected: int) -> None:
    engine.go_to_page(expected if expected > 1 else 2)

    engine.go_to_page(raw)

    assert engine.query.current_page == expected


def test_next_and_previous_page(engine: CatalogQueryEngine) -> None:
    engine.next_page()
    engine.next_page()
    assert engine.query.current_page == 3

    engine.previous_page()
    assert engine.query.current_page == 2


def test_previous_page_stops_at_first(engine: CatalogQueryEngine) -> None:
    outcome = engine.previous_page()

    assert outcome.ok
    assert not outcome.changed
    assert engine.query.current_page == 1


def test_next_page_stops_at_last(engine: CatalogQueryEngine) -> None:
    engine.go_to_page(12)

    outcome = engine.next_page()

    assert outcome.ok
    assert not outcome.changed
    assert engine.query.current_page == 12


def test_custom_max_pages(taxonomy: FilterTaxonomy) -> None:
    engine = CatalogQueryEngine(taxonomy, HeuristicResultCounter(), max_pages=3)

    engine.go_to_page(10)

    assert engine.query.current_page == 3


# ==============================================================================
# URL binding
# ==============================================================================


def test_every_change_replaces_url(engine: CatalogQueryEngine, replace_url: Mock) -> None:
    engine.toggle_filter("category", "chairs")
    engine.set_sort("rating")
    engine.go_to_page(2)
    engine.set_view_mode(ViewMode.LIST)

    assert replace_url.call_count == 4
    replace_url.assert_called_with("/products?category=chairs&sort=rating&page=2&view=list")


def test_from_url_restores_state(taxonomy: FilterTaxonomy) -> None:
    engine = CatalogQueryEngine.from_url(
        "?category=sofas,chairs&room=office&sort=newest&page=3&view=list",
        taxonomy,
        HeuristicResultCounter(),
    )

    assert engine.query.selected("category") == ("sofas", "chairs")
    assert engine.query.selected("room") == ("office",)
    assert engine.query.sort_by == "newest"
    assert engine.query.current_page == 3
    assert engine.query.view_mode is ViewMode.LIST
    assert engine.result_count() == 120


def test_load_round_trips_serialize(engine: CatalogQueryEngine, taxonomy: FilterTaxonomy) -> None:
    engine.toggle_filter("features", "eco-friendly")
    engine.toggle_filter("price", "over-10000")
    engine.set_sort("price-high")
    engine.go_to_page(6)

    other = CatalogQueryEngine(taxonomy, HeuristicResultCounter())
    other.load(engine.serialize())

    assert other.query == engine.query
    assert other.result_count() == engine.result_count()


def test_load_same_state_is_unchanged(engine: CatalogQueryEngine, replace_url: Mock) -> None:
    engine.toggle_filter("category", "beds")
    replace_url.reset_mock()

    outcome = engine.load(engine.serialize())

    assert not outcome.changed
    replace_url.assert_not_called()


def test_to_url_with_explicit_path(engine: CatalogQueryEngine) -> None:
    engine.set_sort("newest")

    assert engine.to_url("/catalog") == "/catalog?sort=newest"
