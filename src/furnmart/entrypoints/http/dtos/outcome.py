from pydantic import BaseModel, Field


class CorrectionDTO(BaseModel):
    code: str
    message: str


class OutcomeDTO(BaseModel):
    """Result of the requested update; the client decides how to present it."""

    ok: bool = Field(description="False when the update was rejected")
    changed: bool = Field(description="True when the state differs from before the request")
    code: str | None = Field(
        default=None,
        description="Error code of the rejection (e.g. INVALID_PROMO_CODE)",
        examples=["INVALID_PROMO_CODE"],
    )
    message: str | None = Field(default=None, examples=["Invalid promo code"])
    corrections: list[CorrectionDTO] = Field(
        default_factory=list,
        description="Input adjustments made while accepting the update (e.g. clamped quantity)",
    )
