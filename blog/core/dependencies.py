from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from blog.core.auth_service import AuthService
from blog.core.db.store import DataStore
from blog.core.models import User

# auto_error=False so a missing header reaches AuthService and is reported
# with the same 401 envelope as a bad token
security = HTTPBearer(auto_error=False)


def get_store(request: Request) -> DataStore:
    return request.app.state.store


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    token = credentials.credentials if credentials else None
    return auth_service.current_user(token)
