"""Token manager for issuing and verifying JWT access tokens."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from jose import JWTError, jwt

from bloglist.configs import Settings
from bloglist.monitoring import get_logger
from bloglist.schemas.auth import TokenData

logger = get_logger(__name__)

ACCESS_TOKEN_TYPE = "access"


class TokenManager:
    """
    Issue and verify signed access tokens.

    The signing secret is held by the instance rather than read from global
    state, so callers choose which secret a verification runs against.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str | None = None,
        audience: str | None = None,
        expire_minutes: int = 60,
    ) -> None:
        if not secret_key:
            mssg = "A secret key is required to sign tokens"
            raise ValueError(mssg)
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenManager":
        """Build a manager from application settings."""
        return cls(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_AUDIENCE,
            expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        )

    def create_access_token(
        self,
        user_id: UUID,
        username: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """
        Create a new access token.

        Args:
            user_id: Subject user's id
            username: Subject user's username
            expires_delta: Optional expiration time delta

        Returns:
            str: Encoded JWT access token
        """
        now = datetime.now(UTC)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))

        to_encode = {
            "sub": username,
            "user_id": str(user_id),
            "jti": str(uuid4()),
            "iat": now,
            "exp": expire,
            "type": ACCESS_TOKEN_TYPE,
        }
        if self.issuer:
            to_encode["iss"] = self.issuer
        if self.audience:
            to_encode["aud"] = self.audience

        return jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)

    def decode_access_token(self, token: str) -> TokenData | None:
        """
        Decode and validate an access token.

        Args:
            token: JWT token string

        Returns:
            TokenData | None: Decoded claims, or None if the token is invalid,
            expired, signed with another secret or not an access token
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
            )
        except JWTError as e:
            logger.info(f"Rejected access token: {e}")
            return None

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            return None

        raw_user_id = payload.get("user_id")
        try:
            user_id = UUID(raw_user_id) if raw_user_id else None
        except (TypeError, ValueError):
            return None

        return TokenData(
            username=payload.get("sub"),
            user_id=user_id,
            jti=payload.get("jti"),
            token_type=ACCESS_TOKEN_TYPE,
        )
