"""Password hashing (argon2)."""

from argon2 import PasswordHasher as _Argon2Hasher, exceptions as argon_exc


class PasswordHasher:
    """One-way hashing with constant-time verification."""

    def __init__(self, hasher: _Argon2Hasher | None = None):
        self._ph = hasher or _Argon2Hasher()

    def hash(self, plain: str) -> str:
        return self._ph.hash(plain)

    def matches(self, plain: str, digest: str | None) -> bool:
        if not digest:
            return False
        try:
            return self._ph.verify(digest, plain)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
