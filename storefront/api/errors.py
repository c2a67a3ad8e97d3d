# storefront/api/errors.py
from fastapi import HTTPException

from storefront.domain.results import AccountErrorKind, Err

STATUS_BY_KIND = {
    AccountErrorKind.DUPLICATE_ACCOUNT: 409,
    AccountErrorKind.PASSWORD_MISMATCH: 400,
    AccountErrorKind.ACCOUNT_NOT_FOUND: 404,
    AccountErrorKind.INVALID_FIELD: 422,
    AccountErrorKind.AUTHENTICATION_FAILED: 401,
    AccountErrorKind.PRODUCT_NOT_FOUND: 404,
}


def to_http_error(result: Err) -> HTTPException:
    return HTTPException(
        status_code=STATUS_BY_KIND.get(result.kind, 400),
        detail={"error": result.kind.value, "message": result.error.message},
    )
