from fastapi import APIRouter, Depends
from typing import List

from blog.core.db.store import DataStore
from blog.core.dependencies import get_store
from blog.core.errors import NotFoundError
from blog.core.schemas import UserRead

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserRead])
async def read_users(store: DataStore = Depends(get_store)):
    """Get list of users."""
    return [UserRead.model_validate(u) for u in store.list_users()]


@router.get("/{user_id}", response_model=UserRead)
async def read_user(user_id: str, store: DataStore = Depends(get_store)):
    """Get user by ID."""
    user = store.get_user_by_id(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return UserRead.model_validate(user)
