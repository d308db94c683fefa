import logging

from fastapi import APIRouter, Depends

from blog.core.auth_service import AuthService, AuthResult
from blog.core.dependencies import get_auth_service, get_current_user
from blog.core.models import User
from blog.core.schemas import RegisterRequest, LoginRequest, AuthResponse, MessageResponse, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(token=result.token, user=UserRead.model_validate(result.user))


@router.post("/register", response_model=AuthResponse)
async def register_user(
    request: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Create a new user and return an access token."""
    result = auth_service.register(request.user_name, request.password)
    logger.info("Registered user %s", result.user.id)
    return _auth_response(result)


@router.post("/login", response_model=AuthResponse)
async def login_user(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Login user and return access token."""
    result = auth_service.login(request.user_name, request.password)
    logger.info("User %s logged in", result.user.id)
    return _auth_response(result)


@router.post("/logout", response_model=MessageResponse)
async def logout_user(current_user: User = Depends(get_current_user)):
    """Tokens are not revoked server-side; the client discards its token."""
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserRead)
async def read_current_user(current_user: User = Depends(get_current_user)):
    return UserRead.model_validate(current_user)
