from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

from jose import JWTError, jwt

from careercode.utils.errors import InvalidToken, Unauthenticated

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_HOURS = 10
COOKIE_NAME = "token"


class TokenService:
    """Issues and verifies the signed session tokens carried in the `token` cookie.

    Tokens are not stored anywhere; a token is valid while its signature checks
    out and its `exp` claim is in the future.
    """

    def __init__(self, secret_key: str, expire_hours: int = ACCESS_TOKEN_EXPIRE_HOURS):
        self.secret_key = secret_key
        self.lifetime = timedelta(hours=expire_hours)

    def issue(self, identity: Mapping[str, Any], issued_at: Optional[datetime] = None) -> str:
        to_encode = dict(identity)
        issued_at = issued_at or datetime.now(timezone.utc)
        to_encode["exp"] = issued_at + self.lifetime
        return jwt.encode(to_encode, self.secret_key, algorithm=ALGORITHM)

    def verify(self, token: Optional[str]) -> Dict[str, Any]:
        """Return the identity the token was issued for.

        Raises Unauthenticated when no token is given and InvalidToken for any
        verification failure, expiry included.
        """
        if not token:
            raise Unauthenticated()

        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[ALGORITHM],
                # Identity claims are opaque; only the signature and exp are checked.
                options={"verify_aud": False, "verify_sub": False, "verify_jti": False},
            )
        except JWTError:
            raise InvalidToken()

        payload.pop("exp", None)
        return payload
