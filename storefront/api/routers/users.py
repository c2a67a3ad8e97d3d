from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from storefront.api.dependencies import ensure_owner, get_account_service, get_current_user_id
from storefront.api.errors import to_http_error
from storefront.domain.results import Err
from storefront.domain.schemas import LoginIn, TokenOut, UserRead, UserRegister
from storefront.services.account_service import AccountService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=UserRead, status_code=201)
def register(payload: UserRegister, service: AccountService = Depends(get_account_service)):
    result = service.register(
        email=payload.email,
        name=payload.name,
        raw_password=payload.password,
        confirm_password=payload.confirm_password,
    )
    if isinstance(result, Err):
        raise to_http_error(result)
    return UserRead.model_validate(result.value)


@router.post("/login", response_model=TokenOut)
def login(payload: LoginIn, service: AccountService = Depends(get_account_service)):
    result = service.login(payload.email, payload.password)
    if isinstance(result, Err):
        raise to_http_error(result)
    token = result.value
    return TokenOut(
        grant_type=token.grant_type,
        access_token=token.access_token,
        expires_at=token.expires_at,
    )


@router.get("/me", response_model=UserRead)
def me(
    user_id: int = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
):
    user = service.find_by_id(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserRead.model_validate(user)


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, service: AccountService = Depends(get_account_service)):
    user = service.find_by_id(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserRead.model_validate(user)


@router.patch("/{user_id}", response_model=UserRead)
def patch_user(
    user_id: int,
    updates: Dict[str, Any] = Body(...),
    current_user_id: int = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
):
    ensure_owner(user_id, current_user_id)

    result = service.patch_user(user_id, updates)
    if isinstance(result, Err):
        raise to_http_error(result)
    return UserRead.model_validate(result.value)


@router.delete("/{user_id}", status_code=204)
def delete_user(
    user_id: int,
    current_user_id: int = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
):
    ensure_owner(user_id, current_user_id)

    result = service.delete_user(user_id)
    if isinstance(result, Err):
        raise to_http_error(result)
    return Response(status_code=204)
