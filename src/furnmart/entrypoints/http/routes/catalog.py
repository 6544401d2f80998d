from fastapi import APIRouter, Depends, Request

from furnmart.entrypoints.http.dependencies import get_browse_catalog_use_case
from furnmart.entrypoints.http.dtos.catalog import (
    CatalogResponseDTO,
    GoToPageDTO,
    SetSortDTO,
    SetViewModeDTO,
    ToggleFilterDTO,
)
from furnmart.entrypoints.http.error_responses import ErrorResponse
from furnmart.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from furnmart.use_cases.browse_catalog import BrowseCatalog


router = APIRouter(
    prefix="/catalog",
    tags=["Catalog"],
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)

_CATALOG_STATE_NOTE = """
The catalog state travels in the request's own query string, in the same
format as the storefront URL (e.g. `?category=chairs&price=under-1000&page=2`).
The response carries the new canonical `url` to write back with
`history.replaceState`.
"""


@router.get(
    "",
    response_model=CatalogResponseDTO,
    summary="Read catalog state from URL",
    description=_CATALOG_STATE_NOTE,
)
def get_catalog(
    request: Request,
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> CatalogResponseDTO:
    return CatalogMapper.to_response(use_case.view(request.url.query))


@router.post(
    "/filters/toggle",
    response_model=CatalogResponseDTO,
    summary="Toggle a filter option",
    description=_CATALOG_STATE_NOTE + "\nResets the page to 1.",
)
def toggle_filter(
    payload: ToggleFilterDTO,
    request: Request,
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> CatalogResponseDTO:
    result = use_case.toggle_filter(request.url.query, payload.group, payload.value)
    return CatalogMapper.to_response(result)


@router.post(
    "/filters/clear",
    response_model=CatalogResponseDTO,
    summary="Clear all filters",
    description=_CATALOG_STATE_NOTE,
)
def clear_filters(
    request: Request,
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> CatalogResponseDTO:
    return CatalogMapper.to_response(use_case.clear_all_filters(request.url.query))


@router.put(
    "/sort",
    response_model=CatalogResponseDTO,
    summary="Change sort order",
    description=_CATALOG_STATE_NOTE + "\nThe current page is kept.",
)
def set_sort(
    payload: SetSortDTO,
    request: Request,
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> CatalogResponseDTO:
    return CatalogMapper.to_response(use_case.set_sort(request.url.query, payload.sort_by))


@router.put(
    "/view",
    response_model=CatalogResponseDTO,
    summary="Switch grid/list view",
    description=_CATALOG_STATE_NOTE,
)
def set_view_mode(
    payload: SetViewModeDTO,
    request: Request,
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> CatalogResponseDTO:
    result = use_case.set_view_mode(request.url.query, payload.view_mode)
    return CatalogMapper.to_response(result)


@router.put(
    "/page",
    response_model=CatalogResponseDTO,
    summary="Go to page",
    description=_CATALOG_STATE_NOTE + "\nOut-of-range pages are clamped.",
)
def go_to_page(
    payload: GoToPageDTO,
    request: Request,
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> CatalogResponseDTO:
    return CatalogMapper.to_response(use_case.go_to_page(request.url.query, payload.page))


@router.post("/page/next", response_model=CatalogResponseDTO, summary="Next page")
def next_page(
    request: Request,
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> CatalogResponseDTO:
    return CatalogMapper.to_response(use_case.next_page(request.url.query))


@router.post("/page/previous", response_model=CatalogResponseDTO, summary="Previous page")
def previous_page(
    request: Request,
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> CatalogResponseDTO:
    return CatalogMapper.to_response(use_case.previous_page(request.url.query))
