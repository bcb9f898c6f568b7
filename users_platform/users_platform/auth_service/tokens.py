from datetime import datetime, timedelta, timezone
import uuid

import jwt

from .config import settings
from .errors import Unauthorized
from .schemas import TokenPair

ACCESS = "access"
REFRESH = "refresh"


class TokenService:
    """Issues and decodes the signed access/refresh JWT pair."""

    def __init__(
        self,
        secret_key: str = settings.JWT_SECRET_KEY,
        refresh_secret_key: str = settings.JWT_REFRESH_SECRET_KEY,
        algorithm: str = settings.JWT_ALGORITHM,
        access_token_expire_minutes: int = settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        refresh_token_expire_days: int = settings.REFRESH_TOKEN_EXPIRE_DAYS,
    ):
        self.algorithm = algorithm
        self._keys = {ACCESS: secret_key, REFRESH: refresh_secret_key}
        self._lifetimes = {
            ACCESS: timedelta(minutes=access_token_expire_minutes),
            REFRESH: timedelta(days=refresh_token_expire_days),
        }

    def _encode(self, user_id: int, token_type: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "type": token_type,
            "iat": now,
            "exp": now + self._lifetimes[token_type],
            # keeps tokens issued within the same second distinct
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._keys[token_type], algorithm=self.algorithm)

    def generate_token_pair(self, user_id: int) -> TokenPair:
        return TokenPair(
            access_token=self._encode(user_id, ACCESS),
            refresh_token=self._encode(user_id, REFRESH),
        )

    def decode_token(self, token: str, token_type: str = ACCESS) -> dict:
        """
        Decode and verify a token of the given type.

        Raises:
            Unauthorized: If the signature, expiry or type claim is invalid
        """
        try:
            data = jwt.decode(token, self._keys[token_type], algorithms=[self.algorithm])
        except jwt.PyJWTError as exc:
            raise Unauthorized("Invalid token") from exc
        if data.get("type") != token_type:
            raise Unauthorized("Invalid token")
        return data
