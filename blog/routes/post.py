import logging

from fastapi import APIRouter, Depends, Response, status
from typing import List, Optional

from blog.core.db.store import DataStore
from blog.core.dependencies import get_store, get_current_user
from blog.core.errors import ForbiddenError, NotFoundError
from blog.core.models import Post, User
from blog.core.schemas import PostCreate, PostUpdate, PostRead, LikeRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/posts", tags=["posts"])


def _post_read(store: DataStore, post: Post) -> PostRead:
    """Attach the post's likes and like count."""
    likes = store.list_likes_for_post(post.id)
    data = PostRead.model_validate(post)
    data.likes = [LikeRead.model_validate(like) for like in likes]
    data.likes_count = len(likes)
    return data


def _get_own_post(store: DataStore, post_id: int, user: User) -> Post:
    post = store.get_post(post_id)
    if post is None:
        raise NotFoundError("Post", post_id)
    if post.author_id != user.id:
        raise ForbiddenError("Only the author can modify this post")
    return post


@router.get("", response_model=List[PostRead])
async def read_posts(
    search: Optional[str] = None,
    store: DataStore = Depends(get_store)
):
    """Get posts, newest first, optionally filtered by a search term."""
    return [_post_read(store, p) for p in store.list_posts(search)]


@router.get("/{post_id}", response_model=PostRead)
async def read_post(post_id: int, store: DataStore = Depends(get_store)):
    post = store.get_post(post_id)
    if post is None:
        raise NotFoundError("Post", post_id)
    return _post_read(store, post)


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
async def create_new_post(
    post_in: PostCreate,
    response: Response,
    current_user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Create a new post authored by the current user."""
    post = store.create_post(post_in.title, post_in.content, current_user.id)
    logger.info("User %s created post %s", current_user.id, post.id)
    response.headers["Location"] = f"{router.prefix}/{post.id}"
    return _post_read(store, post)


@router.put("/{post_id}", response_model=PostRead)
async def update_existing_post(
    post_id: int,
    post_in: PostUpdate,
    current_user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Update title and content. Only the author may edit."""
    _get_own_post(store, post_id, current_user)
    post = store.update_post(post_id, post_in.title, post_in.content)
    logger.info("User %s updated post %s", current_user.id, post_id)
    return _post_read(store, post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_existing_post(
    post_id: int,
    current_user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Delete a post and its likes. Only the author may delete."""
    _get_own_post(store, post_id, current_user)
    store.delete_post(post_id)
    logger.info("User %s deleted post %s", current_user.id, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
