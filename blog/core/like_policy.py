"""Business rules for liking and unliking posts.

The store only guarantees that a like points at an existing post and is
unique per (post, user). The rules about who may like what live here.
"""

from typing import Optional

from blog.core.db.store import DataStore
from blog.core.errors import (
    ConflictError,
    InvalidOperationError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from blog.core.models import Like


def _require_user(user_id: Optional[str]) -> str:
    if not user_id:
        raise UnauthenticatedError("User not authenticated")
    return user_id


def like_post(store: DataStore, post_id: int, user_id: Optional[str]) -> Like:
    """Like ``post_id`` on behalf of ``user_id``.

    Raises UnauthenticatedError without a caller, ValidationError for a
    non-positive id, NotFoundError for a missing post, InvalidOperationError
    for a self-like and ConflictError when the caller already likes the post.
    """
    user_id = _require_user(user_id)

    if post_id <= 0:
        raise ValidationError("Invalid post ID", field="post_id")

    post = store.get_post(post_id)
    if post is None:
        raise NotFoundError("Post", post_id)

    if post.author_id == user_id:
        raise InvalidOperationError("You cannot like your own post")

    if store.has_user_liked(post_id, user_id):
        raise ConflictError("You have already liked this post")

    like = store.create_like(post_id, user_id)
    if like is None:
        # The store re-checks under its lock; a concurrent like or delete won
        if store.get_post(post_id) is None:
            raise NotFoundError("Post", post_id)
        raise ConflictError("You have already liked this post")
    return like


def unlike_post(store: DataStore, post_id: int, user_id: Optional[str]) -> None:
    user_id = _require_user(user_id)
    if not store.delete_like(post_id, user_id):
        raise NotFoundError("Like")
