from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Like:
    id: int
    post_id: int
    user_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
