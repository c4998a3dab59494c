"""API sessions and the access tokens issued under them."""

from django.conf import settings
from django.db import models


class OAuthSession(models.Model):
    """An API client session owned by a user."""
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="oauth_sessions",
    )
    client_name = models.CharField(max_length=100)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "oauth_session"

    def __str__(self):
        return f"OAuthSession({self.client_name}, owner={self.owner_id})"


class AccessToken(models.Model):
    """Opaque bearer token; the token string is the primary key."""
    id = models.CharField(primary_key=True, max_length=64)
    session = models.ForeignKey(
        OAuthSession,
        on_delete=models.CASCADE,
        related_name="tokens",
    )
    expires_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "access_token"
        ordering = ["-created_at"]

    def __str__(self):
        return f"AccessToken(session={self.session_id})"
