"""Custom user model with forum profile metadata and avatar helpers."""

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.core.validators import MaxLengthValidator
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Forum member: auth fields plus the public profile shown on user pages."""

    PROFILE_FIELDS = (
        'github_name',
        'real_name',
        'city',
        'company',
        'twitter_account',
        'personal_website',
        'introduction',
        'weibo_name',
        'weibo_id',
    )

    github_name = models.CharField(max_length=100, blank=True, default='')
    real_name = models.CharField(max_length=100, blank=True, default='')
    city = models.CharField(max_length=100, blank=True, default='')
    company = models.CharField(max_length=100, blank=True, default='')
    twitter_account = models.CharField(max_length=100, blank=True, default='')
    personal_website = models.CharField(max_length=255, blank=True, default='')
    introduction = models.TextField(
        max_length=1000,
        blank=True,
        default='',
        validators=[MaxLengthValidator(1000)],
    )
    weibo_name = models.CharField(max_length=100, blank=True, default='')
    weibo_id = models.CharField(max_length=100, blank=True, default='')

    # filename under AVATAR_UPLOAD_DIR, blank until the first upload or cache refresh
    avatar = models.CharField(max_length=255, blank=True, default='')
    image_url = models.URLField(max_length=500, blank=True, default='')
    login_token = models.CharField(max_length=64, blank=True, default='')
    is_banned = models.BooleanField(default=False)

    class Meta:
        ordering = ['-id']

    def __str__(self):
        return self.username

    @property
    def display_name(self):
        return self.real_name or self.username

    def gravatar(self, size=None):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email or self.username)
        return gravatar_object.get_image(size=size or settings.GRAVATAR_SIZE, default='identicon')

    @property
    def avatar_url(self):
        """Uploaded avatar URL, or the gravatar fallback when none is stored."""
        if self.avatar:
            return f"{settings.MEDIA_URL}{settings.AVATAR_UPLOAD_DIR}/{self.avatar}"
        return self.gravatar()
