"""Topics a user has marked as favourite."""

from django.conf import settings
from django.db import models


class FavouriteTopic(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="favourite_topics",
    )
    topic = models.ForeignKey(
        "community.Topic",
        on_delete=models.CASCADE,
        related_name="favourited_by",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "favourite_topic"
        constraints = [
            models.UniqueConstraint(fields=["user", "topic"], name="uniq_favourite_topic_user_topic"),
        ]

    def __str__(self) -> str:
        return f"FavouriteTopic(user={self.user_id}, topic={self.topic_id})"
