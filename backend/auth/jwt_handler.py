from datetime import datetime, timedelta, timezone

import jwt

from backend.core import config


def create_access_token(
    user_id: str,
    email: str,
    role: str,
    expires_minutes: int | None = None,
    now: datetime | None = None,
) -> str:
    expire_minutes = expires_minutes if expires_minutes is not None else config.JWT_EXPIRES_MINUTES
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=expire_minutes),
    }
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
