"""Access token issuing and verification."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from nutritrack.domain.errors import UnauthorizedError
from nutritrack.domain.users import UserRecord


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""

    user_id: str
    email: str
    role: str


@dataclass
class TokenService:
    """Signs and verifies HS256 access tokens."""

    secret: str
    algorithm: str = "HS256"
    ttl_minutes: int = 1440

    def issue(self, user: UserRecord) -> str:
        """Return a signed token for the user."""
        now = datetime.now(tz=UTC)
        payload = {
            "id": user.id,
            "email": user.email,
            "role": user.role,
            "iat": now,
            "exp": now + timedelta(minutes=self.ttl_minutes),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Return the claims of a valid token."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise UnauthorizedError("Token has expired. Please login again.") from exc
        except JWTError as exc:
            raise UnauthorizedError("Invalid token. Please login again.") from exc
        user_id = payload.get("id")
        if not isinstance(user_id, str) or not user_id:
            raise UnauthorizedError("Invalid token. Please login again.")
        return TokenClaims(
            user_id=user_id,
            email=str(payload.get("email", "")),
            role=str(payload.get("role", "")),
        )
