import shutil
import tempfile
from io import BytesIO

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from PIL import Image

from community.models import User

CONTENT_TYPES = {"PNG": "image/png", "JPEG": "image/jpeg", "GIF": "image/gif", "BMP": "image/bmp"}


def make_user(username="johndoe", **kwargs):
    """Create a member with a known password."""
    email = kwargs.pop("email", f"{username}@example.org")
    password = kwargs.pop("password", "Password123")
    return User.objects.create_user(
        username=username,
        email=email,
        password=password,
        **kwargs,
    )


def image_bytes(size=(500, 300), image_format="PNG", color="red"):
    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format=image_format)
    return buffer.getvalue()


def make_image_upload(name="avatar.png", size=(500, 300), image_format="PNG"):
    """Uploaded file holding a solid-colour image."""
    return SimpleUploadedFile(
        name,
        image_bytes(size, image_format),
        content_type=CONTENT_TYPES.get(image_format, "application/octet-stream"),
    )


class TempMediaMixin:
    """Point MEDIA_ROOT at a throwaway directory for each test."""

    def setUp(self):
        super().setUp()
        self.media_root = tempfile.mkdtemp()
        media_override = override_settings(MEDIA_ROOT=self.media_root)
        media_override.enable()
        self.addCleanup(media_override.disable)
        self.addCleanup(shutil.rmtree, self.media_root, ignore_errors=True)

    def avatar_path(self, name):
        return f"{self.media_root}/uploads/avatars/{name}"
