from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .user import User


@dataclass
class Post:
    id: int
    title: str
    content: str
    author_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None

    # Resolved by lookup when posts are listed; never stored
    author: Optional[User] = None
    author_name: Optional[str] = None
