import logging

from fastapi import APIRouter, Depends
from typing import List

from blog.core import like_policy
from blog.core.db.store import DataStore
from blog.core.dependencies import get_store, get_current_user
from blog.core.models import User
from blog.core.schemas import LikeRead, LikeResponse, LikeStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/likes", tags=["likes"])


@router.get("/post/{post_id}", response_model=List[LikeRead])
async def read_post_likes(post_id: int, store: DataStore = Depends(get_store)):
    return [LikeRead.model_validate(like) for like in store.list_likes_for_post(post_id)]


@router.post("/post/{post_id}", response_model=LikeResponse)
async def like_post_endpoint(
    post_id: int,
    current_user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Like a post."""
    like_policy.like_post(store, post_id, current_user.id)
    logger.info("User %s liked post %s", current_user.id, post_id)
    return LikeResponse(
        message="Post liked successfully",
        liked=True,
        likes_count=store.likes_count(post_id),
    )


@router.delete("/post/{post_id}", response_model=LikeResponse)
async def unlike_post_endpoint(
    post_id: int,
    current_user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Unlike a post."""
    like_policy.unlike_post(store, post_id, current_user.id)
    logger.info("User %s unliked post %s", current_user.id, post_id)
    return LikeResponse(
        message="Post unliked successfully",
        liked=False,
        likes_count=store.likes_count(post_id),
    )


@router.get("/post/{post_id}/status", response_model=LikeStatus)
async def read_like_status(
    post_id: int,
    current_user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Check whether the current user liked a post."""
    return LikeStatus(has_liked=store.has_user_liked(post_id, current_user.id))
