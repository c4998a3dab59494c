"""
Avatar update workflow.

An uploaded image is checked against the allowed extensions, written to the
avatar directory as `{user_id}_{unix_seconds}.{extension}`, shrunk to fit
inside AVATAR_MAX_SIZE (GIFs are stored untouched so animations survive) and
finally referenced from the user record.

The file write and the record update are not wrapped in a transaction, and
previous avatar files are never removed.
"""

import logging
import os
import time
from dataclasses import dataclass
from urllib.parse import urlparse

import requests
from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import FileSystemStorage
from PIL import Image

from community.policies import authorize_update
from community.repos.user_repo import UserRepo
from community.services.exceptions import GithubFetchError, NoFileProvided, UnsupportedFormat

logger = logging.getLogger(__name__)

EXTENSION_VALID = "valid"
EXTENSION_MISSING = "missing"
EXTENSION_DISALLOWED = "disallowed"


@dataclass(frozen=True)
class ExtensionCheck:
    """Outcome of classifying a client-supplied filename."""
    status: str
    extension: str = ""

    @property
    def is_allowed(self):
        return self.status != EXTENSION_DISALLOWED

    def storage_extension(self, default):
        """Extension to store under; missing extensions fall back to default."""
        return self.extension if self.status == EXTENSION_VALID else default


def classify_extension(filename, allowed=None):
    """Classify the extension of filename as valid, missing or disallowed."""
    allowed = allowed if allowed is not None else settings.AVATAR_ALLOWED_EXTENSIONS
    basename = (filename or "").replace("\\", "/").rsplit("/", 1)[-1]
    _, dot, extension = basename.rpartition(".")
    extension = extension if dot else ""
    if not extension:
        return ExtensionCheck(EXTENSION_MISSING)
    if extension not in allowed:
        return ExtensionCheck(EXTENSION_DISALLOWED, extension)
    return ExtensionCheck(EXTENSION_VALID, extension)


def avatar_storage():
    """Storage rooted at the avatar directory; same-name writes overwrite."""
    return FileSystemStorage(
        location=os.path.join(settings.MEDIA_ROOT, settings.AVATAR_UPLOAD_DIR),
        base_url=f"{settings.MEDIA_URL}{settings.AVATAR_UPLOAD_DIR}/",
        allow_overwrite=True,
    )


def downsize_image(path, max_size):
    """Shrink the image at path to fit max_size x max_size, keeping aspect ratio."""
    with Image.open(path) as img:
        image_format = img.format
        # thumbnail() never enlarges
        img.thumbnail((max_size, max_size))
        img.save(path, format=image_format)
        return img.size


class AvatarUpdateService:
    """Store uploaded or remote avatars and point the user record at them."""

    def __init__(self, user_repo=None, storage_factory=avatar_storage, clock=time.time):
        self.user_repo = user_repo or UserRepo()
        self.storage_factory = storage_factory
        self.clock = clock

    def update_avatar(self, user_id, actor, uploaded_file):
        """
        Replace the avatar of user_id with uploaded_file on behalf of actor.

        Raises User.DoesNotExist, PermissionDenied, NoFileProvided or
        UnsupportedFormat. Storage and image decoding errors propagate.
        """
        user = self.user_repo.find_by_id(user_id)
        authorize_update(actor, user)

        if uploaded_file is None or not getattr(uploaded_file, "name", ""):
            raise NoFileProvided()

        check = classify_extension(uploaded_file.name)
        if not check.is_allowed:
            raise UnsupportedFormat(check.extension)
        extension = check.storage_extension(settings.AVATAR_DEFAULT_EXTENSION)

        user.avatar = self._store(user.id, uploaded_file, extension)
        user.save(update_fields=["avatar"])
        logger.info("Avatar updated for user %s: %s", user.id, user.avatar)
        return user

    def cache_remote_avatar(self, user, url):
        """Download url into the avatar directory and set it on user (caller saves)."""
        try:
            response = requests.get(url, timeout=settings.GITHUB_API_TIMEOUT)
        except requests.RequestException as exc:
            raise GithubFetchError(user.github_name, detail=str(exc)) from exc
        if response.status_code != 200:
            raise GithubFetchError(user.github_name, status_code=response.status_code)

        check = classify_extension(urlparse(url).path)
        extension = check.storage_extension(settings.AVATAR_DEFAULT_EXTENSION)
        if not check.is_allowed:
            extension = settings.AVATAR_DEFAULT_EXTENSION

        user.avatar = self._store(user.id, ContentFile(response.content), extension)
        logger.info("Cached remote avatar for user %s from %s", user.id, url)
        return user.avatar

    def _store(self, user_id, content, extension):
        storage = self.storage_factory()
        avatar_name = storage.save(f"{user_id}_{int(self.clock())}.{extension}", content)
        if extension != "gif":
            downsize_image(storage.path(avatar_name), settings.AVATAR_MAX_SIZE)
        return avatar_name
