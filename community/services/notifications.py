"""Service helpers for creating and reading notifications."""

import logging

from community.models import Notification

logger = logging.getLogger(__name__)


class Notifier:
    """Create in-app notifications for member activity."""

    def __init__(self, notification_model=Notification):
        self.notification_model = notification_model

    def new_follow_notify(self, sender, recipient):
        """Tell recipient that sender started following them."""
        notification = self.notification_model.objects.create(
            recipient=recipient,
            sender=sender,
            notification_type=self.notification_model.TYPE_FOLLOW,
        )
        logger.debug("Follow notification %s: %s -> %s", notification.pk, sender.pk, recipient.pk)
        return notification

    def unread_count(self, user):
        return self.notification_model.objects.filter(recipient=user, is_read=False).count()
