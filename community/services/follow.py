from django.db import transaction

from community.repos.followers_repo import FollowersRepo
from community.services.notifications import Notifier


class FollowService:
    """Follow/unfollow on behalf of an explicit actor."""

    def __init__(self, actor, followers_repo=None, notifier=None):
        self.actor = actor
        self.followers_repo = followers_repo or FollowersRepo()
        self.notifier = notifier or Notifier()

    def _can_act(self, target):
        return (
            self.actor
            and getattr(self.actor, "is_authenticated", False)
            and target
            and self.actor != target
        )

    def is_following(self, target):
        if not self._can_act(target):
            return False
        return self.followers_repo.is_following(follower_id=self.actor.pk, author_id=target.pk)

    @transaction.atomic
    def follow(self, target):
        if not self._can_act(target):
            return {"status": "noop"}
        self.followers_repo.add(follower_id=self.actor.pk, author_id=target.pk)
        self.notifier.new_follow_notify(self.actor, target)
        return {"status": "followed"}

    @transaction.atomic
    def unfollow(self, target):
        if not self._can_act(target):
            return {"status": "noop"}
        self.followers_repo.remove(follower_id=self.actor.pk, author_id=target.pk)
        return {"status": "unfollowed"}

    def toggle_follow(self, target):
        """Unfollow when already following, otherwise follow and notify target."""
        if not self._can_act(target):
            return {"status": "noop"}
        if self.is_following(target):
            return self.unfollow(target)
        return self.follow(target)
