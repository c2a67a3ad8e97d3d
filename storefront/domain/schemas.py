# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime


class UserRegister(BaseModel):
    """Registration form."""

    email: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    confirm_password: str = Field(..., min_length=1)


class LoginIn(BaseModel):
    email: str
    password: str


class TokenOut(BaseModel):
    grant_type: str
    access_token: str
    expires_at: datetime


class UserRead(BaseModel):
    """User as returned to clients, never carries the password hash."""

    id: int
    email: str
    name: str
    role: str
    signup_date: datetime

    model_config = ConfigDict(from_attributes=True)


class CartItemIn(BaseModel):
    """Adding a product to a user's cart."""

    user_id: int = Field(..., gt=0, description="user id (must be > 0)")
    product_id: int = Field(..., gt=0, description="product id (must be > 0)")
    quantity: int = Field(..., gt=0, description="quantity (must be > 0)")


class CartLineOut(BaseModel):
    cart_id: int
    user_id: int
    product_id: int
    quantity: int
    date_added: datetime

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    user_id: int
    items: List[CartLineOut]
    total: Decimal
