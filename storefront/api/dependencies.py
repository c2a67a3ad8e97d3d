# storefront/api/dependencies.py
from functools import partial

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.data.unit_of_work import UnitOfWork
from storefront.security.authenticator import Authenticator
from storefront.security.passwords import PasswordHasher
from storefront.security.tokens import TokenIssuer
from storefront.services.account_service import AccountService
from storefront.services.cart_service import CartService

_hasher = PasswordHasher()
_bearer = HTTPBearer(auto_error=False)


def get_token_issuer() -> TokenIssuer:
    return TokenIssuer()


def get_account_service(
    db: Session = Depends(get_db),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AccountService:
    uow_factory = partial(UnitOfWork, db)
    return AccountService(
        uow_factory=uow_factory,
        hasher=_hasher,
        authenticator=Authenticator(uow_factory, _hasher),
        token_issuer=token_issuer,
    )


def get_cart_service(db: Session = Depends(get_db)) -> CartService:
    return CartService(uow_factory=partial(UnitOfWork, db))


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> int:
    if credentials is None:
        raise HTTPException(status_code=401, detail="Missing bearer token")
    try:
        claims = token_issuer.decode(credentials.credentials)
        return int(claims["sub"])
    except (jwt.InvalidTokenError, KeyError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid or expired token") from None


def ensure_owner(user_id: int, current_user_id: int) -> None:
    """Callers may only act on their own account."""
    if user_id != current_user_id:
        raise HTTPException(status_code=403, detail="Access to another account is forbidden")
