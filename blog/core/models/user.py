from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    id: str
    user_name: str
    email: str
    password_secret: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
