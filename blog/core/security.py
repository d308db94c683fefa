"""Password hashing and JWT helpers.

Passwords are stored as salted PBKDF2-SHA256 hashes via passlib. Tokens are
HS256 JWTs signed with python-jose.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from blog.core import settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Stored value is not a recognised hash
        return False


def dummy_verify() -> None:
    """Run a verify against a throwaway hash, costing as much as a real check."""
    pwd_context.dummy_verify()


def create_access_token(
    data: dict,
    secret_key: str = settings.SECRET_KEY,
    expires_delta: Optional[timedelta] = None,
    algorithm: str = settings.JWT_ALGORITHM,
    issuer: str = settings.JWT_ISSUER,
    audience: str = settings.JWT_AUDIENCE,
) -> str:
    """Sign ``data`` into a JWT with a fresh ``jti`` and an ``exp`` claim."""
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)

    to_encode = data.copy()
    to_encode.update({
        "jti": str(uuid.uuid4()),
        "iss": issuer,
        "aud": audience,
        "iat": now,
        "exp": now + expires_delta,
    })
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def verify_token(
    token: str,
    secret_key: str = settings.SECRET_KEY,
    algorithm: str = settings.JWT_ALGORITHM,
    issuer: str = settings.JWT_ISSUER,
    audience: str = settings.JWT_AUDIENCE,
) -> Optional[dict]:
    """Return the token's claims, or None if it is invalid or expired."""
    try:
        return jwt.decode(
            token,
            secret_key,
            algorithms=[algorithm],
            audience=audience,
            issuer=issuer,
        )
    except JWTError:
        return None
