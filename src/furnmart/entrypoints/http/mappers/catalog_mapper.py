from __future__ import annotations

from furnmart.entrypoints.http.dtos.catalog import CatalogResponseDTO
from furnmart.entrypoints.http.mappers.outcome_mapper import to_outcome_response
from furnmart.use_cases.browse_catalog import CatalogResult


class CatalogMapper:
    """Maps catalog use case results to REST DTOs."""

    @staticmethod
    def to_response(result: CatalogResult) -> CatalogResponseDTO:
        query = result.query
        return CatalogResponseDTO(
            filters={group: list(values) for group, values in query.filters.items()},
            sort_by=query.sort_by,
            view_mode=query.view_mode,
            current_page=query.current_page,
            items_per_page=query.items_per_page,
            max_pages=result.max_pages,
            result_count=result.result_count,
            query_string=result.query_string,
            url=result.url,
            outcome=to_outcome_response(result.outcome),
        )
