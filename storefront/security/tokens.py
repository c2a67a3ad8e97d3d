# storefront/security/tokens.py
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from storefront.security.authenticator import VerifiedIdentity
from storefront.utils.settings import ACCESS_TOKEN_TTL_SECONDS, JWT_ALGORITHM, JWT_SECRET


@dataclass(frozen=True)
class AccessToken:
    grant_type: str
    access_token: str
    expires_at: datetime


class TokenIssuer:
    """Signs time-bounded access tokens for verified identities."""

    def __init__(
        self,
        secret: str | None = None,
        algorithm: str | None = None,
        ttl_seconds: int | None = None,
    ):
        self.secret = secret or JWT_SECRET
        self.algorithm = algorithm or JWT_ALGORITHM
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else ACCESS_TOKEN_TTL_SECONDS

    def issue(self, identity: VerifiedIdentity) -> AccessToken:
        now = datetime.now(timezone.utc)
        expires = now + timedelta(seconds=self.ttl_seconds)
        claims = {
            "sub": str(identity.user_id),
            "email": identity.email,
            "auth": ",".join(identity.authorities),
            "iat": now,
            "exp": expires,
        }
        token = jwt.encode(claims, self.secret, algorithm=self.algorithm)
        return AccessToken(grant_type="Bearer", access_token=token, expires_at=expires)

    def decode(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry; raises jwt.InvalidTokenError otherwise."""
        return dict(jwt.decode(token, self.secret, algorithms=[self.algorithm]))
