from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime

from .like import LikeRead
from .user import UserRead

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
CONTENT_MIN_LENGTH = 10
CONTENT_MAX_LENGTH = 5000


def _check_length(value: str, name: str, minimum: int, maximum: int) -> str:
    if not value or not value.strip():
        raise ValueError(f"{name} cannot be null or empty")
    if len(value) < minimum:
        raise ValueError(f"{name} must be at least {minimum} characters long")
    if len(value) > maximum:
        raise ValueError(f"{name} cannot exceed {maximum} characters")
    return value


class PostBase(BaseModel):
    title: str
    content: str

    @field_validator("title")
    @classmethod
    def _validate_title(cls, v):
        return _check_length(v, "Title", TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)

    @field_validator("content")
    @classmethod
    def _validate_content(cls, v):
        return _check_length(v, "Content", CONTENT_MIN_LENGTH, CONTENT_MAX_LENGTH)


class PostCreate(PostBase):
    pass


class PostUpdate(PostBase):
    pass


class PostRead(BaseModel):
    id: int
    title: str
    content: str
    author_id: str
    author_name: Optional[str] = None
    author: Optional[UserRead] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    likes: List[LikeRead] = []
    likes_count: int = 0
    model_config = ConfigDict(from_attributes=True)
