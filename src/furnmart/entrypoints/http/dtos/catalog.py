from pydantic import BaseModel, ConfigDict, Field

from furnmart.domain.catalog import ViewMode
from furnmart.entrypoints.http.dtos.outcome import OutcomeDTO


class ToggleFilterDTO(BaseModel):
    group: str = Field(description="Filter group name", examples=["price"])
    value: str = Field(description="Option within the group", examples=["under-1000"])


class SetSortDTO(BaseModel):
    sort_by: str = Field(examples=["price-low"])


class SetViewModeDTO(BaseModel):
    view_mode: ViewMode = Field(examples=["list"])


class GoToPageDTO(BaseModel):
    """Requested page; out-of-range and non-numeric values are clamped."""

    page: int | str = Field(examples=[3])


class CatalogResponseDTO(BaseModel):
    filters: dict[str, list[str]]
    sort_by: str
    view_mode: ViewMode
    current_page: int
    items_per_page: int
    max_pages: int
    result_count: int
    query_string: str = Field(description="Canonical query string without '?'")
    url: str = Field(
        description="Value for history.replaceState (the bare catalog path when at defaults)",
        examples=["/products"],
    )
    outcome: OutcomeDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "filters": {
                    "category": ["chairs"],
                    "price": ["under-1000"],
                    "room": [],
                    "features": [],
                },
                "sort_by": "featured",
                "view_mode": "grid",
                "current_page": 1,
                "items_per_page": 12,
                "max_pages": 12,
                "result_count": 135,
                "query_string": "category=chairs&price=under-1000",
                "url": "/products?category=chairs&price=under-1000",
                "outcome": {"ok": True, "changed": True, "corrections": []},
            }
        }
    )
