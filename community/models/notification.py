from django.conf import settings
from django.db import models

"""
Notification model

In-app notifications for users. `recipient` is notified about something
`sender` did; only follow notifications are produced by this app.
"""


class Notification(models.Model):
    TYPE_FOLLOW = 'follow'
    TYPES = [
        (TYPE_FOLLOW, 'Follow'),
    ]

    recipient = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='notifications', on_delete=models.CASCADE)
    sender = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='sent_notifications', on_delete=models.CASCADE)
    notification_type = models.CharField(max_length=20, choices=TYPES)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"Notification for {self.recipient}: {self.notification_type}"
