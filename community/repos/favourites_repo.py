"""Repository helpers for favourite topics."""

from community.db_accessor import DB_Accessor
from community.models.favourite_topic import FavouriteTopic
from community.models.topic import Topic


class FavouritesRepo(DB_Accessor):
    """Join-relation repository for user → favourite topic."""
    def __init__(self) -> None:
        super().__init__(FavouriteTopic)

    def add(self, *, user_id: int, topic_id: int) -> FavouriteTopic:
        relation, _ = self.get_or_create(user_id=user_id, topic_id=topic_id)
        return relation

    def remove(self, *, user_id: int, topic_id: int) -> int:
        return self.delete(user_id=user_id, topic_id=topic_id)

    def topics_for(self, user_id: int):
        """Favourite topics, newest topic first."""
        return (
            Topic.objects.filter(favourited_by__user_id=user_id)
            .select_related("user")
            .order_by("-id")
        )
