"""In-memory data store for users, posts and likes.

``DataStore`` owns the three collections and the id counters. Every public
method takes the store lock, so a mutation is never observed half-applied
and two writers never race on a counter or on the duplicate-like check.

Entities handed out are copies: callers can read and annotate them freely
without touching the store's own records.
"""

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional

from blog.core.errors import NotFoundError
from blog.core.models import User, Post, Like
from blog.core.security import dummy_verify, verify_password


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DataStore:

    def __init__(self):
        self._lock = threading.RLock()
        self._posts: List[Post] = []
        self._likes: List[Like] = []
        self._users: List[User] = []
        self._next_post_id = 1
        self._next_like_id = 1

    # --- Posts ---

    def list_posts(self, search: Optional[str] = None) -> List[Post]:
        """All posts, newest first, optionally filtered by ``search``.

        The filter is a case-insensitive substring match on title or content
        and is skipped when ``search`` is empty or whitespace. Posts are
        annotated with their author, as in ``get_post``.
        """
        with self._lock:
            posts = self._posts
            if search and search.strip():
                needle = search.casefold()
                posts = [
                    p for p in posts
                    if needle in p.title.casefold() or needle in p.content.casefold()
                ]

            ordered = sorted(posts, key=lambda p: p.created_at, reverse=True)
            return [self._with_author(post) for post in ordered]

    def get_post(self, post_id: int) -> Optional[Post]:
        with self._lock:
            post = self._find_post(post_id)
            return self._with_author(post) if post else None

    def create_post(
        self,
        title: str,
        content: str,
        author_id: str,
        *,
        created_at: Optional[datetime] = None,
    ) -> Post:
        """Store a new post under the next post id.

        ``created_at`` defaults to now; seeding passes an explicit value to
        backdate demo content.
        """
        with self._lock:
            post = Post(
                id=self._next_post_id,
                title=title,
                content=content,
                author_id=author_id,
                created_at=created_at or _utcnow(),
                updated_at=None,
            )
            self._next_post_id += 1
            self._posts.append(post)
            return replace(post)

    def update_post(self, post_id: int, title: str, content: str) -> Post:
        with self._lock:
            post = self._find_post(post_id)
            if post is None:
                raise NotFoundError("Post", post_id)

            post.title = title
            post.content = content
            post.updated_at = _utcnow()
            return replace(post)

    def delete_post(self, post_id: int) -> None:
        """Remove a post together with every like that references it."""
        with self._lock:
            post = self._find_post(post_id)
            if post is None:
                raise NotFoundError("Post", post_id)

            self._posts.remove(post)
            self._likes = [like for like in self._likes if like.post_id != post_id]

    # --- Likes ---

    def list_likes_for_post(self, post_id: int) -> List[Like]:
        with self._lock:
            return [replace(like) for like in self._likes if like.post_id == post_id]

    def likes_count(self, post_id: int) -> int:
        with self._lock:
            return sum(1 for like in self._likes if like.post_id == post_id)

    def create_like(
        self,
        post_id: int,
        user_id: str,
        *,
        created_at: Optional[datetime] = None,
    ) -> Optional[Like]:
        """Store a like, or return None if the post is missing or already liked by the user."""
        with self._lock:
            if self._find_post(post_id) is None:
                return None
            if self._find_like(post_id, user_id) is not None:
                return None

            like = Like(
                id=self._next_like_id,
                post_id=post_id,
                user_id=user_id,
                created_at=created_at or _utcnow(),
            )
            self._next_like_id += 1
            self._likes.append(like)
            return replace(like)

    def delete_like(self, post_id: int, user_id: str) -> bool:
        with self._lock:
            like = self._find_like(post_id, user_id)
            if like is None:
                return False
            self._likes.remove(like)
            return True

    def has_user_liked(self, post_id: int, user_id: str) -> bool:
        with self._lock:
            return self._find_like(post_id, user_id) is not None

    # --- Users ---

    def list_users(self) -> List[User]:
        with self._lock:
            return [replace(user) for user in self._users]

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            user = self._find_user_by_id(user_id)
            return replace(user) if user else None

    def get_user_by_name(self, user_name: str) -> Optional[User]:
        with self._lock:
            user = self._find_user_by_name(user_name)
            return replace(user) if user else None

    def user_exists(self, user_name: str) -> bool:
        with self._lock:
            return self._find_user_by_name(user_name) is not None

    def create_user(self, user_name: str, email: str, password_secret: str) -> User:
        with self._lock:
            user = User(
                id=str(uuid.uuid4()),
                user_name=user_name,
                email=email,
                password_secret=password_secret,
                created_at=_utcnow(),
            )
            self._users.append(user)
            return replace(user)

    def validate_password(self, user_name: str, candidate: str) -> bool:
        with self._lock:
            user = self._find_user_by_name(user_name)
            secret = user.password_secret if user else None
        if secret is None:
            # Spend the same hashing work so a missing user is not faster
            dummy_verify()
            return False
        return verify_password(candidate, secret)

    # --- Lookups (caller holds the lock) ---

    def _with_author(self, post: Post) -> Post:
        annotated = replace(post)
        author = self._find_user_by_id(post.author_id)
        if author is not None:
            annotated.author = replace(author)
            annotated.author_name = author.user_name
        return annotated

    def _find_post(self, post_id: int) -> Optional[Post]:
        return next((p for p in self._posts if p.id == post_id), None)

    def _find_like(self, post_id: int, user_id: str) -> Optional[Like]:
        return next(
            (l for l in self._likes if l.post_id == post_id and l.user_id == user_id),
            None,
        )

    def _find_user_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    def _find_user_by_name(self, user_name: str) -> Optional[User]:
        # Exact match: user names are case-sensitive
        return next((u for u in self._users if u.user_name == user_name), None)
