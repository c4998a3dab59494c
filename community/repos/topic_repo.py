"""Repository helpers for topics and replies."""

from community.db_accessor import DB_Accessor
from community.models.topic import Topic, Reply


class TopicRepo(DB_Accessor):
    def __init__(self) -> None:
        super().__init__(Topic)

    def recent_for(self, user):
        return self.model.objects.whose(user).recent()


class ReplyRepo(DB_Accessor):
    def __init__(self) -> None:
        super().__init__(Reply)

    def recent_for(self, user):
        return self.model.objects.whose(user).recent().select_related("topic")
