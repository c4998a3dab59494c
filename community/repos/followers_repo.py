"""Repository helpers for follower relationships."""

from community.db_accessor import DB_Accessor
from community.models.followers import Follower
from community.models.user import User


class FollowersRepo(DB_Accessor):
    """Join-relation repository for the follow graph."""
    def __init__(self) -> None:
        super().__init__(Follower)

    def is_following(self, *, follower_id: int, author_id: int) -> bool:
        """Return True if follower_id follows author_id."""
        return self.exists(follower_id=follower_id, author_id=author_id)

    def add(self, *, follower_id: int, author_id: int) -> Follower:
        """Create a follower relation (no-op when it already exists)."""
        relation, _ = self.get_or_create(follower_id=follower_id, author_id=author_id)
        return relation

    def remove(self, *, follower_id: int, author_id: int) -> int:
        return self.delete(follower_id=follower_id, author_id=author_id)

    def following_users(self, user_id: int):
        """Users that user_id follows, newest user id first."""
        return User.objects.filter(followers__follower_id=user_id).order_by("-id")
