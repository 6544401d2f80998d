from pydantic import BaseModel, ConfigDict

from furnmart.entrypoints.http.dtos.outcome import OutcomeDTO


class WishlistResponseDTO(BaseModel):
    product_ids: list[int]
    count: int
    outcome: OutcomeDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "product_ids": [3, 7],
                "count": 2,
                "outcome": {"ok": True, "changed": True, "corrections": []},
            }
        }
    )
