"""Repository helpers for user lookups."""

from typing import Any, Mapping

from community.db_accessor import DB_Accessor
from community.models.user import User

RECENT_USERS_LIMIT = 48


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        super().__init__(User)

    def find_by_id(self, user_id: int) -> User:
        """Return a user by id; raises User.DoesNotExist."""
        return self.get(id=user_id)

    def recent(self, limit: int = RECENT_USERS_LIMIT):
        """Most recently registered users first."""
        return self.model.objects.order_by("-id")[:limit]

    def update_fields(self, user_id: int, fields: Mapping[str, Any]) -> int:
        """Apply a partial update to a single user row."""
        return self.update({"id": user_id}, **fields)

    def save(self, user: User) -> User:
        user.save()
        return user
