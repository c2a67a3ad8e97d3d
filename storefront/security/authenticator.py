# storefront/security/authenticator.py
from dataclasses import dataclass
from typing import Callable, Tuple

from storefront.data.unit_of_work import UnitOfWork
from storefront.security.passwords import PasswordHasher


class AuthenticationFailed(Exception):
    """Credentials could not be verified."""


@dataclass(frozen=True)
class VerifiedIdentity:
    user_id: int
    email: str
    authorities: Tuple[str, ...]


class Authenticator:
    """Checks raw credentials against the stored password hash."""

    def __init__(self, uow_factory: Callable[[], UnitOfWork], hasher: PasswordHasher):
        self.uow_factory = uow_factory
        self.hasher = hasher

    def verify(self, email: str, plain: str) -> VerifiedIdentity:
        with self.uow_factory() as uow:
            user = uow.users.find_by_email(email)
            # same message for unknown email and wrong password
            if user is None or not self.hasher.matches(plain, user.password_hash):
                raise AuthenticationFailed("Bad credentials")
            return VerifiedIdentity(
                user_id=user.id,
                email=user.email,
                authorities=(user.role,),
            )
