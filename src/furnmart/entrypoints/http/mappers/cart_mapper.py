from __future__ import annotations

from furnmart.domain.cart import LineItem
from furnmart.entrypoints.http.dtos.cart import (
    AddCartItemDTO,
    CartResponseDTO,
    LineItemResponseDTO,
)
from furnmart.entrypoints.http.mappers.outcome_mapper import to_outcome_response
from furnmart.use_cases.manage_cart import CartResult


class CartMapper:
    """Maps between REST DTOs and domain models for the cart."""

    @staticmethod
    def to_domain_item(dto: AddCartItemDTO) -> LineItem:
        return LineItem(
            id=dto.id,
            name=dto.name,
            unit_price=dto.unit_price,
            quantity=dto.quantity,
            image_ref=dto.image_ref,
            variant=dto.variant,
        )

    @staticmethod
    def to_item_response(item: LineItem) -> LineItemResponseDTO:
        return LineItemResponseDTO(
            id=item.id,
            name=item.name,
            unit_price=item.unit_price,
            quantity=item.quantity,
            image_ref=item.image_ref,
            variant=item.variant,
            line_total=item.line_total,
        )

    @staticmethod
    def to_response(result: CartResult) -> CartResponseDTO:
        """
        Converts the use case result to the REST response.

        Args:
            result: Cart snapshot and outcome of the update

        Returns:
            CartResponseDTO: Items, totals, and outcome
        """
        return CartResponseDTO(
            items=[CartMapper.to_item_response(item) for item in result.items],
            promo_code=result.promo_code,
            subtotal=result.totals.subtotal,
            discount=result.totals.discount,
            total=result.totals.total,
            item_count=result.totals.item_count,
            is_empty=result.is_empty,
            outcome=to_outcome_response(result.outcome),
        )
