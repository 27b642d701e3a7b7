"""Password hashing, JWT access tokens and signed client-state cookies."""
import base64
import hashlib
import hmac
import json
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from mlcourse.core.config import get_settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt hard limit
MAX_PASSWORD_BYTES = 72


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(user_id: str, issued_at: datetime | None = None) -> str:
    """Sign a token carrying {userId} that expires after the configured hours."""
    settings = get_settings()
    issued_at = issued_at or datetime.now(timezone.utc)
    expire = issued_at + timedelta(hours=settings.access_token_expire_hours)
    to_encode = {"userId": user_id, "iat": issued_at, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict | None:
    """Return the payload of a valid token; None when expired, malformed or forged."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None


# Client-state cookie: base64(json).hmac
def _signature(payload: bytes) -> str:
    settings = get_settings()
    return hmac.new(settings.secret_key.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def sign_data(data: Any) -> str:
    """Serialize data to a tamper-evident cookie value."""
    payload = json.dumps(data, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=") + "." + _signature(payload)


def unsign_data(value: str | None) -> Any | None:
    """Return the data of a signed cookie value; None if absent or tampered."""
    if not value or "." not in value:
        return None
    try:
        encoded, sig = value.rsplit(".", 1)
        pad = 4 - len(encoded) % 4
        if pad != 4:
            encoded += "=" * pad
        payload = base64.urlsafe_b64decode(encoded)
        if not hmac.compare_digest(_signature(payload), sig):
            return None
        return json.loads(payload.decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return None
