"""Topics and replies authored by forum members."""

from django.conf import settings
from django.db import models


class AuthoredQuerySet(models.QuerySet):
    """Query helpers shared by topics and replies."""

    def whose(self, user):
        return self.filter(user=user)

    def recent(self):
        return self.order_by('-created_at', '-id')


class Topic(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='topics',
    )
    title = models.CharField(max_length=255)
    body = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    objects = AuthoredQuerySet.as_manager()

    class Meta:
        db_table = 'topic'

    def __str__(self):
        return self.title


class Reply(models.Model):
    topic = models.ForeignKey(
        Topic,
        on_delete=models.CASCADE,
        related_name='replies',
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='replies',
    )
    body = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    objects = AuthoredQuerySet.as_manager()

    class Meta:
        db_table = 'reply'
        verbose_name_plural = 'replies'

    def __str__(self):
        return f"Reply {self.id} on {self.topic_id}"
