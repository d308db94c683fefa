from datetime import datetime, timedelta, timezone

from blog.core.db.store import DataStore
from blog.core.security import get_password_hash

SAMPLE_PASSWORD = "password123"


def seed_sample_data(store: DataStore) -> None:
    """Populate an empty store with two demo users, three posts and two likes."""
    now = datetime.now(timezone.utc)
    secret = get_password_hash(SAMPLE_PASSWORD)

    john = store.create_user("johndoe", "johndoe@test.com", secret)
    jane = store.create_user("janesmith", "janesmith@test.com", secret)

    welcome = store.create_post(
        "Welcome to the Blog",
        "This is the first post on our blog. We're excited to share our thoughts and ideas with you!",
        john.id,
        created_at=now - timedelta(days=2),
    )
    getting_started = store.create_post(
        "Getting Started with .NET",
        "Today we're going to explore the basics of .NET development and best practices "
        "for building robust applications.",
        jane.id,
        created_at=now - timedelta(days=1),
    )
    store.create_post(
        "Modern Web Development",
        "Web development has evolved significantly. Let's discuss the latest trends and "
        "technologies that are shaping the industry.",
        john.id,
        created_at=now - timedelta(hours=5),
    )

    store.create_like(welcome.id, jane.id, created_at=now - timedelta(hours=1))
    store.create_like(getting_started.id, john.id, created_at=now - timedelta(hours=2))
