from __future__ import annotations
from typing import Dict
from django.http import HttpRequest
from community.services import Notifier


def unread_notifications(request: HttpRequest) -> Dict[str, object]:
    """Expose the unread notification count to templates."""
    user = getattr(request, "user", None)
    if not user or not user.is_authenticated:
        return {}
    return {"unread_notifications_count": Notifier().unread_count(user)}
