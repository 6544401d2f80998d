from __future__ import annotations

from furnmart.entrypoints.http.dtos.wishlist import WishlistResponseDTO
from furnmart.entrypoints.http.mappers.outcome_mapper import to_outcome_response
from furnmart.use_cases.manage_wishlist import WishlistResult


class WishlistMapper:
    """Maps the wishlist use case result to its REST response."""

    @staticmethod
    def to_response(result: WishlistResult) -> WishlistResponseDTO:
        return WishlistResponseDTO(
            product_ids=list(result.product_ids),
            count=result.count,
            outcome=to_outcome_response(result.outcome),
        )
