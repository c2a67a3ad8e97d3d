# storefront/domain/results.py
"""
Result values returned by the services.

Services never raise for business failures; they return Err with an error
kind and let the HTTP layer pick the status code.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class AccountErrorKind(str, Enum):
    DUPLICATE_ACCOUNT = "duplicate_account"
    PASSWORD_MISMATCH = "password_mismatch"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INVALID_FIELD = "invalid_field"
    AUTHENTICATION_FAILED = "authentication_failed"
    PRODUCT_NOT_FOUND = "product_not_found"


@dataclass(frozen=True)
class AccountError:
    kind: AccountErrorKind
    message: str


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: AccountError

    @property
    def kind(self) -> AccountErrorKind:
        return self.error.kind


Result = Union[Ok[T], Err]


def err(kind: AccountErrorKind, message: str) -> Err:
    return Err(AccountError(kind=kind, message=message))
