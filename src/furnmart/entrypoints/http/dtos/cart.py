from pydantic import BaseModel, ConfigDict, Field

from furnmart.entrypoints.http.dtos.outcome import OutcomeDTO


class LineItemResponseDTO(BaseModel):
    id: int
    name: str
    unit_price: int
    quantity: int
    image_ref: str
    variant: str
    line_total: int


class AddCartItemDTO(BaseModel):
    """Request payload for adding a product to the cart."""

    id: int = Field(description="Product id, unique within the cart", examples=[1])
    name: str = Field(min_length=1, examples=["Modern Dining Chair"])
    unit_price: int = Field(description="Price in whole currency units", ge=0, examples=[899])
    quantity: int = Field(default=1, ge=1, le=99, examples=[2])
    image_ref: str = Field(default="", examples=["images/products/chair-1.jpg"])
    variant: str = Field(default="", description="e.g. color", examples=["Beige"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Modern Dining Chair",
                "unit_price": 899,
                "quantity": 2,
                "image_ref": "images/products/chair-1.jpg",
                "variant": "Beige",
            }
        }
    )


class SetQuantityDTO(BaseModel):
    """Request payload for changing a quantity.

    Text is accepted as typed into the quantity field; it is clamped into [1, 99].
    """

    quantity: int | str = Field(examples=[3, "150", "abc"])


class ApplyPromoCodeDTO(BaseModel):
    code: str = Field(description="Case-insensitive, surrounding spaces ignored", examples=["save10"])


class CartResponseDTO(BaseModel):
    items: list[LineItemResponseDTO]
    promo_code: str | None
    subtotal: int
    discount: int
    total: int
    item_count: int
    is_empty: bool
    outcome: OutcomeDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [
                    {
                        "id": 1,
                        "name": "Modern Dining Chair",
                        "unit_price": 899,
                        "quantity": 2,
                        "image_ref": "images/products/chair-1.jpg",
                        "variant": "Beige",
                        "line_total": 1798,
                    }
                ],
                "promo_code": "SAVE10",
                "subtotal": 1798,
                "discount": 180,
                "total": 1618,
                "item_count": 2,
                "is_empty": False,
                "outcome": {"ok": True, "changed": True, "corrections": []},
            }
        }
    )
