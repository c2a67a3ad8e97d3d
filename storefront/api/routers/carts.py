#storefront/api/routers/carts.py
from fastapi import APIRouter, Depends

from storefront.api.dependencies import ensure_owner, get_cart_service, get_current_user_id
from storefront.api.errors import to_http_error
from storefront.domain.results import Err
from storefront.domain.schemas import CartItemIn, CartLineOut, CartOut
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["carts"])


@router.post("/items", response_model=CartLineOut, status_code=201)
def add_item(
    payload: CartItemIn,
    current_user_id: int = Depends(get_current_user_id),
    svc: CartService = Depends(get_cart_service),
):
    ensure_owner(payload.user_id, current_user_id)

    result = svc.add_to_cart(
        user_id=payload.user_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )
    if isinstance(result, Err):
        raise to_http_error(result)
    return CartLineOut.model_validate(result.value)


@router.get("/{user_id}", response_model=CartOut)
def get_cart(
    user_id: int,
    current_user_id: int = Depends(get_current_user_id),
    svc: CartService = Depends(get_cart_service),
):
    ensure_owner(user_id, current_user_id)
    return CartOut.model_validate(svc.get_cart(user_id))
