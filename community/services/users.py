"""Profile maintenance: attribute edits, bans, login and access tokens."""

import logging
import secrets

from django.utils.crypto import get_random_string

from community.models import AccessToken, User
from community.policies import authorize_manage_users, authorize_update

logger = logging.getLogger(__name__)

LOGIN_TOKEN_MIN_LENGTH = 20
LOGIN_TOKEN_MAX_LENGTH = 32


class ProfileService:
    """Mutations on a user's own profile record."""

    def __init__(self, access_token_model=AccessToken):
        self.access_token_model = access_token_model

    def update_profile(self, actor, user, data):
        """Apply the editable profile attributes in data to user."""
        authorize_update(actor, user)
        changed = [field for field in User.PROFILE_FIELDS if field in data]
        for field in changed:
            setattr(user, field, data[field])
        if changed:
            user.save(update_fields=changed)
        return user

    def toggle_ban(self, actor, user):
        authorize_manage_users(actor)
        user.is_banned = not user.is_banned
        user.save(update_fields=["is_banned"])
        logger.info("User %s %s by %s", user.pk, "banned" if user.is_banned else "unbanned", actor.pk)
        return user.is_banned

    def regenerate_login_token(self, actor):
        """Give actor a fresh login token; returns None for anonymous actors."""
        if not actor or not getattr(actor, "is_authenticated", False):
            return None
        length = LOGIN_TOKEN_MIN_LENGTH + secrets.randbelow(LOGIN_TOKEN_MAX_LENGTH - LOGIN_TOKEN_MIN_LENGTH + 1)
        actor.login_token = get_random_string(length)
        actor.save(update_fields=["login_token"])
        return actor.login_token

    def access_tokens_for(self, user):
        """Tokens issued under API sessions owned by user."""
        return (
            self.access_token_model.objects.filter(session__owner=user)
            .select_related("session")
        )

    def revoke_access_token(self, actor, token_id):
        """Delete token_id when actor owns its session; return whether it was revoked."""
        if not actor or not getattr(actor, "is_authenticated", False):
            return False
        token = (
            self.access_token_model.objects.select_related("session")
            .filter(id=token_id)
            .first()
        )
        if token is None or token.session.owner_id != actor.pk:
            return False
        token.delete()
        logger.info("Access token revoked by user %s", actor.pk)
        return True
