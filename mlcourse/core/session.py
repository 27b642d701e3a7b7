"""Request-scoped login session for the web pages.

The issued JWT lives in an httponly cookie. Every request rebuilds an explicit
Session from it and checks the expiry before anything uses the token; an
expired or forged cookie yields no session.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from fastapi import Request

from mlcourse.core.config import get_settings
from mlcourse.core.security import decode_access_token


@dataclass(frozen=True)
class Session:
    token: str
    user_id: str
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(timezone.utc)) >= self.expires_at


def session_from_token(token: str | None) -> Session | None:
    if not token:
        return None
    payload = decode_access_token(token)
    if not payload or "userId" not in payload or "exp" not in payload:
        return None
    session = Session(
        token=token,
        user_id=payload["userId"],
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )
    if session.is_expired():
        return None
    return session


def get_session(request: Request) -> Session | None:
    """Dependency: current session, or None for guests."""
    settings = get_settings()
    return session_from_token(request.cookies.get(settings.auth_cookie_name))
