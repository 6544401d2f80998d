from fastapi import APIRouter, Depends, Path

from furnmart.entrypoints.http.dependencies import get_manage_wishlist_use_case
from furnmart.entrypoints.http.dtos.wishlist import WishlistResponseDTO
from furnmart.entrypoints.http.error_responses import ErrorResponse
from furnmart.entrypoints.http.mappers.wishlist_mapper import WishlistMapper
from furnmart.use_cases.manage_wishlist import ManageWishlist


router = APIRouter(
    prefix="/wishlists/{wishlist_id}",
    tags=["Wishlist"],
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)


@router.get("", response_model=WishlistResponseDTO, summary="Get wishlist")
def get_wishlist(
    use_case: ManageWishlist = Depends(get_manage_wishlist_use_case),
) -> WishlistResponseDTO:
    """A wishlist that was never written to is returned empty."""
    return WishlistMapper.to_response(use_case.view())


@router.post(
    "/items/{product_id}/toggle",
    response_model=WishlistResponseDTO,
    summary="Toggle product",
    description="Add the product when absent, remove it when present.",
)
def toggle_product(
    product_id: int = Path(ge=1, description="Product id"),
    use_case: ManageWishlist = Depends(get_manage_wishlist_use_case),
) -> WishlistResponseDTO:
    return WishlistMapper.to_response(use_case.toggle(product_id))


@router.put(
    "/items/{product_id}",
    response_model=WishlistResponseDTO,
    summary="Add product",
    description="Idempotent: adding a saved product succeeds with `outcome.changed` false.",
)
def add_product(
    product_id: int = Path(ge=1, description="Product id"),
    use_case: ManageWishlist = Depends(get_manage_wishlist_use_case),
) -> WishlistResponseDTO:
    return WishlistMapper.to_response(use_case.add(product_id))


@router.delete(
    "/items/{product_id}",
    response_model=WishlistResponseDTO,
    summary="Remove product",
    description="Idempotent: removing an absent product succeeds with `outcome.changed` false.",
)
def remove_product(
    product_id: int = Path(ge=1, description="Product id"),
    use_case: ManageWishlist = Depends(get_manage_wishlist_use_case),
) -> WishlistResponseDTO:
    return WishlistMapper.to_response(use_case.remove(product_id))
