"""Follow graph between forum members."""

from django.conf import settings
from django.db import models


class Follower(models.Model):
    """`follower` receives updates about `author`'s topics."""

    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following",
        db_column="follower_id",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="followers",
        db_column="author_id",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "followers"
        constraints = [
            models.UniqueConstraint(fields=["follower", "author"], name="uniq_followers_follower_author"),
            # members cannot follow themselves
            models.CheckConstraint(
                condition=~models.Q(follower=models.F("author")),
                name="chk_followers_not_self",
            ),
        ]

    def __str__(self):
        return f"{self.follower_id} follows {self.author_id}"
