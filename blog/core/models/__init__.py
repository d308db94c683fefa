from .user import User
from .post import Post
from .like import Like

__all__ = [
    "User",
    "Post",
    "Like",
]
