from .auth import RegisterRequest, LoginRequest, AuthResponse, MessageResponse
from .user import UserRead
from .post import PostBase, PostCreate, PostUpdate, PostRead
from .like import LikeRead, LikeResponse, LikeStatus

__all__ = [
    "RegisterRequest", "LoginRequest", "AuthResponse", "MessageResponse",
    "UserRead",
    "PostBase", "PostCreate", "PostUpdate", "PostRead",
    "LikeRead", "LikeResponse", "LikeStatus",
]
