"""
Test suite for the /v1/catalog routes.

The catalog needs no storage: the current state is the request's query
string, and every response carries the canonical URL for the next request.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from furnmart.adapters.heuristic_result_counter import HeuristicResultCounter
from furnmart.domain.catalog import FilterTaxonomy
from furnmart.entrypoints.http.dependencies import get_browse_catalog_use_case
from furnmart.entrypoints.http.exception_handlers import register_exception_handlers
from furnmart.entrypoints.http.routes.catalog import router
from furnmart.use_cases.browse_catalog import BrowseCatalog


@pytest.fixture
def app() -> FastAPI:
    """Create a test FastAPI app with catalog router and exception handlers."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# Reading
# ==============================================================================


def test_get_catalog_defaults(client: TestClient) -> None:
    response = client.get("/v1/catalog")

    assert response.status_code == 200
    data = response.json()
    assert data["filters"] == {"category": [], "price": [], "room": [], "features": []}
    assert data["sort_by"] == "featured"
    assert data["view_mode"] == "grid"
    assert data["current_page"] == 1
    assert data["items_per_page"] == 12
    assert data["max_pages"] == 12
    assert data["result_count"] == 165
    assert data["query_string"] == ""
    assert data["url"] == "/products"


def test_get_catalog_reads_state_from_query_string(client: TestClient) -> None:
    data = client.get("/v1/catalog?category=sofas,chairs&sort=newest&page=3&view=list").json()

    assert data["filters"]["category"] == ["sofas", "chairs"]
    assert data["sort_by"] == "newest"
    assert data["current_page"] == 3
    assert data["view_mode"] == "list"
    assert data["result_count"] == 135


def test_get_catalog_is_lenient(client: TestClient) -> None:
    data = client.get("/v1/catalog?category=lamps&sort=cheapest&page=99&view=tiles").json()

    assert data["filters"]["category"] == []
    assert data["sort_by"] == "featured"
    assert data["current_page"] == 12
    assert data["view_mode"] == "grid"
    assert data["url"] == "/products?page=12"


# ==============================================================================
# Filters
# ==============================================================================


def test_toggle_two_filters(client: TestClient) -> None:
    first = client.post(
        "/v1/catalog/filters/toggle", json={"group": "category", "value": "chairs"}
    ).json()
    second = client.post(
        f"/v1/catalog/filters/toggle?{first['query_string']}",
        json={"group": "price", "value": "under-1000"},
    ).json()

    assert second["url"] == "/products?category=chairs&price=under-1000"
    assert second["result_count"] == 135
    assert second["outcome"]["changed"] is True


def test_toggle_filter_off_and_reset_page(client: TestClient) -> None:
    data = client.post(
        "/v1/catalog/filters/toggle?category=chairs&page=4",
        json={"group": "category", "value": "chairs"},
    ).json()

    assert data["filters"]["category"] == []
    assert data["current_page"] == 1
    assert data["query_string"] == ""


def test_toggle_unknown_filter_returns_422(client: TestClient) -> None:
    response = client.post(
        "/v1/catalog/filters/toggle", json={"group": "colour", "value": "red"}
    )

    assert response.status_code == 422
    assert response.json() == {
        "detail": "unknown filter group 'colour'",
        "code": "VALIDATION_ERROR",
    }


def test_clear_filters(client: TestClient) -> None:
    data = client.post("/v1/catalog/filters/clear?category=beds&room=bedroom&view=list").json()

    assert data["query_string"] == "view=list"
    assert data["result_count"] == 165


def test_clearing_last_filter_returns_bare_path(client: TestClient) -> None:
    data = client.post("/v1/catalog/filters/clear?category=beds").json()

    assert data["query_string"] == ""
    assert data["url"] == "/products"


# ==============================================================================
# Sort, view and paging
# ==============================================================================


def test_set_sort_keeps_page(client: TestClient) -> None:
    data = client.put("/v1/catalog/sort?page=3", json={"sort_by": "price-high"}).json()

    assert data["sort_by"] == "price-high"
    assert data["current_page"] == 3
    assert data["query_string"] == "sort=price-high&page=3"


def test_set_unknown_sort_returns_422(client: TestClient) -> None:
    response = client.put("/v1/catalog/sort", json={"sort_by": "cheapest"})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_set_view_mode(client: TestClient) -> None:
    data = client.put("/v1/catalog/view?category=desks", json={"view_mode": "list"}).json()

    assert data["view_mode"] == "list"
    assert data["query_string"] == "category=desks&view=list"


def test_set_unknown_view_mode_returns_422(client: TestClient) -> None:
    response = client.put("/v1/catalog/view", json={"view_mode": "tiles"})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "view_mode"


def test_go_to_page_clamps_with_correction(client: TestClient) -> None:
    data = client.put("/v1/catalog/page", json={"page": 15}).json()

    assert data["current_page"] == 12
    assert data["outcome"]["ok"] is True
    assert data["outcome"]["corrections"] == [
        {"code": "OUT_OF_RANGE_PAGE", "message": "Page must be between 1 and 12"}
    ]


def test_go_to_page_accepts_text(client: TestClient) -> None:
    data = client.put("/v1/catalog/page", json={"page": "4"}).json()

    assert data["current_page"] == 4
    assert data["outcome"]["corrections"] == []


def test_next_and_previous_page(client: TestClient) -> None:
    assert client.post("/v1/catalog/page/next?page=2").json()["current_page"] == 3
    assert client.post("/v1/catalog/page/previous?page=2").json()["current_page"] == 1


def test_next_page_on_last_page_is_unchanged(client: TestClient) -> None:
    data = client.post("/v1/catalog/page/next?page=12").json()

    assert data["current_page"] == 12
    assert data["outcome"]["changed"] is False


# ==============================================================================
# Dependency override
# ==============================================================================


def test_route_uses_injected_use_case(app: FastAPI, client: TestClient) -> None:
    use_case = BrowseCatalog(
        taxonomy=FilterTaxonomy.from_config({"colour": ("red", "blue")}),
        result_counter=HeuristicResultCounter(base_count=40, step=10, floor=0),
        max_pages=3,
        path="/shop",
    )
    app.dependency_overrides[get_browse_catalog_use_case] = lambda: use_case

    data = client.post(
        "/v1/catalog/filters/toggle?page=2", json={"group": "colour", "value": "blue"}
    ).json()

    assert data["filters"] == {"colour": ["blue"]}
    assert data["max_pages"] == 3
    assert data["result_count"] == 30
    assert data["url"] == "/shop?colour=blue"
