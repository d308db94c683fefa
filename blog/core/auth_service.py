"""Registration, login and token resolution.

Tokens are stateless: nothing is stored server-side, so a token stays valid
until its ``exp`` claim passes. Logging out only means the client drops it.
"""

import unicodedata
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from blog.core import settings
from blog.core.db.store import DataStore
from blog.core.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from blog.core.models import User
from blog.core.security import create_access_token, get_password_hash, verify_token

USER_NAME_MIN_LENGTH = 2
USER_NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 3
EMAIL_DOMAIN = "test.com"


@dataclass
class AuthResult:
    token: str
    user: User


def _is_letter_or_digit(ch: str) -> bool:
    # Letters of any script and decimal digits; excludes superscripts and
    # letter-numbers such as Roman numerals, which str.isalnum accepts
    category = unicodedata.category(ch)
    return category.startswith("L") or category == "Nd"


def validate_user_name(user_name: Optional[str]) -> None:
    if user_name is None or not user_name.strip():
        raise ValidationError("Username cannot be null or empty", field="user_name")
    if len(user_name) < USER_NAME_MIN_LENGTH:
        raise ValidationError(
            f"Username must be at least {USER_NAME_MIN_LENGTH} characters long", field="user_name"
        )
    if len(user_name) > USER_NAME_MAX_LENGTH:
        raise ValidationError(
            f"Username cannot exceed {USER_NAME_MAX_LENGTH} characters", field="user_name"
        )
    if not all(_is_letter_or_digit(ch) for ch in user_name):
        raise ValidationError("Username can only contain letters and digits", field="user_name")


def validate_password_strength(password: Optional[str]) -> None:
    if password is None or not password.strip():
        raise ValidationError("Password cannot be null or empty", field="password")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long", field="password"
        )


class AuthService:

    def __init__(
        self,
        store: DataStore,
        secret_key: str = settings.SECRET_KEY,
        token_lifetime: timedelta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
    ):
        self.store = store
        self.secret_key = secret_key
        self.token_lifetime = token_lifetime

    def register(self, user_name: str, password: str) -> AuthResult:
        """Create an account and sign the new user in.

        Input is validated before the uniqueness check, so a malformed name
        never reveals whether it is taken.
        """
        validate_user_name(user_name)
        validate_password_strength(password)

        if self.store.user_exists(user_name):
            raise ConflictError("Username already exists")

        user = self.store.create_user(
            user_name=user_name,
            email=f"{user_name}@{EMAIL_DOMAIN}",
            password_secret=get_password_hash(password),
        )
        return AuthResult(token=self.issue_token(user), user=user)

    def login(self, user_name: str, password: str) -> AuthResult:
        # validate_password does equal hashing work whether or not the user exists
        if not self.store.validate_password(user_name, password):
            raise InvalidCredentialsError()
        user = self.store.get_user_by_name(user_name)
        if user is None:
            raise InvalidCredentialsError()
        return AuthResult(token=self.issue_token(user), user=user)

    def issue_token(self, user: User) -> str:
        return create_access_token(
            data={"sub": user.id, "email": user.email, "unique_name": user.user_name},
            secret_key=self.secret_key,
            expires_delta=self.token_lifetime,
        )

    def decode_token(self, token: Optional[str]) -> dict:
        """Verified claims of ``token``; raises UnauthenticatedError otherwise."""
        if not token:
            raise UnauthenticatedError()
        payload = verify_token(token, secret_key=self.secret_key)
        if payload is None or not payload.get("sub"):
            raise UnauthenticatedError()
        return payload

    def current_user(self, token: Optional[str]) -> User:
        payload = self.decode_token(token)
        user = self.store.get_user_by_id(payload["sub"])
        if user is None:
            raise NotFoundError("User", payload["sub"])
        return user
