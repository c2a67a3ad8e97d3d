# storefront/domain/roles.py
from enum import Enum

from storefront.utils.settings import DEFAULT_USER_ROLE


class UserRole(str, Enum):
    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"


def default_role() -> UserRole:
    """Role granted to newly registered accounts (DEFAULT_USER_ROLE)."""
    return UserRole(DEFAULT_USER_ROLE)
