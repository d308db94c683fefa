from pydantic import BaseModel, ConfigDict
from datetime import datetime


class LikeRead(BaseModel):
    id: int
    post_id: int
    user_id: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class LikeResponse(BaseModel):
    message: str
    liked: bool
    likes_count: int


class LikeStatus(BaseModel):
    has_liked: bool
