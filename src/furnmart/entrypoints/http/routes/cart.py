from fastapi import APIRouter, Depends

from furnmart.entrypoints.http.dependencies import get_manage_cart_use_case
from furnmart.entrypoints.http.dtos.cart import (
    AddCartItemDTO,
    ApplyPromoCodeDTO,
    CartResponseDTO,
    SetQuantityDTO,
)
from furnmart.entrypoints.http.error_responses import ErrorResponse
from furnmart.entrypoints.http.mappers.cart_mapper import CartMapper
from furnmart.use_cases.manage_cart import ManageCart


router = APIRouter(
    prefix="/carts/{cart_id}",
    tags=["Cart"],
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)


@router.get("", response_model=CartResponseDTO, summary="Get cart")
def get_cart(use_case: ManageCart = Depends(get_manage_cart_use_case)) -> CartResponseDTO:
    """A cart that was never written to is returned empty."""
    return CartMapper.to_response(use_case.view())


@router.post(
    "/items",
    response_model=CartResponseDTO,
    summary="Add item",
    description="""
    Add a product to the cart.

    Adding an id that is already in the cart increases its quantity
    (capped at 99, reported in `outcome.corrections`).
    """,
)
def add_item(
    payload: AddCartItemDTO,
    use_case: ManageCart = Depends(get_manage_cart_use_case),
) -> CartResponseDTO:
    result = use_case.add_item(CartMapper.to_domain_item(payload))
    return CartMapper.to_response(result)


@router.put(
    "/items/{item_id}",
    response_model=CartResponseDTO,
    summary="Set item quantity",
    description="""
    Set the quantity of a line item.

    ## Quantity
    - Clamped into [1, 99]; non-numeric text becomes 1
    - Clamping is reported in `outcome.corrections`

    ## Missing item
    - Nothing changes; `outcome.ok` is false with code `ITEM_NOT_FOUND`
    """,
)
def set_quantity(
    item_id: int,
    payload: SetQuantityDTO,
    use_case: ManageCart = Depends(get_manage_cart_use_case),
) -> CartResponseDTO:
    return CartMapper.to_response(use_case.set_quantity(item_id, payload.quantity))


@router.delete(
    "/items/{item_id}",
    response_model=CartResponseDTO,
    summary="Remove item",
    description="Idempotent: removing an absent item succeeds with `outcome.changed` false.",
)
def remove_item(
    item_id: int,
    use_case: ManageCart = Depends(get_manage_cart_use_case),
) -> CartResponseDTO:
    return CartMapper.to_response(use_case.remove_item(item_id))


@router.post(
    "/promo",
    response_model=CartResponseDTO,
    summary="Apply promo code",
    description="""
    Apply a promo code (case-insensitive).

    - Unknown code: `outcome.ok` false, code `INVALID_PROMO_CODE`
    - Another code already applied: `outcome.ok` false, code `PROMO_CODE_LOCKED`
    - Same code again: success, no double discount
    """,
)
def apply_promo_code(
    payload: ApplyPromoCodeDTO,
    use_case: ManageCart = Depends(get_manage_cart_use_case),
) -> CartResponseDTO:
    return CartMapper.to_response(use_case.apply_promo_code(payload.code))


@router.delete("/promo", response_model=CartResponseDTO, summary="Clear promo code")
def clear_promo_code(
    use_case: ManageCart = Depends(get_manage_cart_use_case),
) -> CartResponseDTO:
    return CartMapper.to_response(use_case.clear_promo_code())
